"""Tag ORM model and the post/tag association table."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)

post_tag = Table(
    "post_tag",
    Base.metadata,
    Column(
        "post_id",
        String(24),
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        String(24),
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Tag(ObjectIdMixin, TimestampMixin, Base):
    """Tag model. Table: tag. Names are stored trimmed and lower-cased."""

    __tablename__ = "tag"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
