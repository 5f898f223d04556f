"""Newsletter subscription ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)


class Subscription(ObjectIdMixin, TimestampMixin, Base):
    """Subscription model. Table: subscription. Email is unique."""

    __tablename__ = "subscription"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
