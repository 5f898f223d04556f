"""PostView ORM model: view ledger used for de-duplication and trending."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from newsroom.infrastructure.persistence.database import Base
from newsroom.infrastructure.persistence.models.mixins import CuidMixin
from newsroom.shared.utils.datetime import utc_now


class PostView(CuidMixin, Base):
    """One row per counted (post, viewer) view. Rows are never updated.

    Rows older than the retention period are removed by the purge job.
    """

    __tablename__ = "post_view"

    post_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("post.id", ondelete="CASCADE"), nullable=False
    )
    viewer_ip: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_post_view_post_viewer", "post_id", "viewer_ip"),
        Index("ix_post_view_created_at", "created_at"),
    )
