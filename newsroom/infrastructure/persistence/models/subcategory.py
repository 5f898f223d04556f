"""SubCategory ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)

if TYPE_CHECKING:
    from newsroom.infrastructure.persistence.models.category import Category


class SubCategory(ObjectIdMixin, TimestampMixin, Base):
    """SubCategory model. Table: sub_category. Slug is unique per category."""

    __tablename__ = "sub_category"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    slug: Mapped[str] = mapped_column(String(80), nullable=False)
    category_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("category.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true"), index=True
    )

    category: Mapped["Category"] = relationship(
        back_populates="subcategories", lazy="joined"
    )

    __table_args__ = (
        UniqueConstraint("category_id", "slug", name="uq_sub_category_category_slug"),
    )
