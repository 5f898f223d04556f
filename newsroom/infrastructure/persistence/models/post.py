"""Post ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)
from newsroom.infrastructure.persistence.models.tag import post_tag

if TYPE_CHECKING:
    from newsroom.infrastructure.persistence.models.category import Category
    from newsroom.infrastructure.persistence.models.subcategory import SubCategory
    from newsroom.infrastructure.persistence.models.tag import Tag


class Post(ObjectIdMixin, TimestampMixin, Base):
    """Post model. Table: post.

    ``views`` is the popularity counter; it is only ever incremented with an
    atomic UPDATE (see PostViewLedger).
    """

    __tablename__ = "post"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(String, nullable=False)
    image_public_id: Mapped[str] = mapped_column(String, nullable=False)
    category_id: Mapped[str | None] = mapped_column(
        String(24),
        ForeignKey("category.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    sub_category_id: Mapped[str | None] = mapped_column(
        String(24),
        ForeignKey("sub_category.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_draft: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false"), index=True
    )
    is_favourite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    views: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    category: Mapped["Category | None"] = relationship(lazy="joined")
    sub_category: Mapped["SubCategory | None"] = relationship(lazy="joined")
    tags: Mapped[list["Tag"]] = relationship(
        secondary=post_tag, lazy="selectin", order_by="Tag.name"
    )
