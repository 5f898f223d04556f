"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, ObjectIdMixin, TimestampMixin, VersionedMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from newsroom.shared.utils.datetime import utc_now
from newsroom.shared.utils.generators import generate_cuid, generate_object_id


class CuidMixin:
    """Mixin for internal models using CUID as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class ObjectIdMixin:
    """Mixin for public content keyed by a 24 hex char id."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(24), primary_key=True, default=generate_object_id)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    Python-side defaults give microsecond ordering on every backend; the
    server defaults cover rows inserted outside the ORM.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
            index=True,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )


class VersionedMixin:
    """Mixin for optimistic locking: version integer, default 1."""

    @declared_attr
    def version(cls) -> Mapped[int]:
        return mapped_column(Integer, default=1, server_default="1", nullable=False)
