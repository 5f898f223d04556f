"""Navigation menu ORM model (single row)."""

from sqlalchemy import JSON
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
)


class NavMenu(CuidMixin, TimestampMixin, Base):
    """Ordered list of category ids shown in the site navigation."""

    __tablename__ = "nav_menu"

    category_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
