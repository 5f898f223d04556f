"""Category ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)

if TYPE_CHECKING:
    from newsroom.infrastructure.persistence.models.subcategory import SubCategory


class Category(ObjectIdMixin, TimestampMixin, Base):
    """Category model. Table: category. Name and slug are unique."""

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true"), index=True
    )

    subcategories: Mapped[list["SubCategory"]] = relationship(
        back_populates="category",
        order_by="SubCategory.created_at.desc()",
        lazy="selectin",
    )
