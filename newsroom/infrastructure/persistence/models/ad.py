"""Ad ORM model."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)


class Ad(ObjectIdMixin, TimestampMixin, Base):
    """Ad model. Table: ad. ``type`` is an AdType value."""

    __tablename__ = "ad"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    link: Mapped[str] = mapped_column(String, nullable=False)
    image_url: Mapped[str] = mapped_column(String, nullable=False)
    image_public_id: Mapped[str] = mapped_column(String, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true"), index=True
    )
