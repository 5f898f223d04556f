"""View ledger retention.

Deletes post_view rows older than the retention period (view_retention_days).
Runs periodically from the application lifespan and on demand from
scripts/purge_post_views.py. The caller commits.
"""

from __future__ import annotations

import asyncio
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsroom.core.config import get_settings
from newsroom.infrastructure.persistence.repositories.post_view_repo import (
    PostViewRepository,
)
from newsroom.shared.telemetry.logging import get_logger
from newsroom.shared.utils.datetime import utc_now

logger = get_logger(__name__)


async def purge_expired_views(
    db: AsyncSession,
    *,
    retention_days: int | None = None,
) -> int:
    """Delete ledger rows created before now - retention_days.

    Args:
        db: Async database session (caller should commit after).
        retention_days: Days to keep; if None, uses settings.view_retention_days.

    Returns:
        Number of rows deleted.
    """
    days = retention_days if retention_days is not None else get_settings().view_retention_days
    cutoff = utc_now() - timedelta(days=days)
    count = await PostViewRepository(db).purge_older_than(cutoff)
    if count:
        logger.info("View ledger purge: deleted %s row(s) older than %s days", count, days)
    return count


async def run_purge_loop(
    session_factory: async_sessionmaker[AsyncSession],
    interval_seconds: float,
) -> None:
    """Purge on a fixed interval until cancelled. Database errors are logged and retried next tick."""
    while True:
        try:
            async with session_factory() as session:
                async with session.begin():
                    await purge_expired_views(session)
        except SQLAlchemyError as e:
            logger.error("View ledger purge failed: %s", e)
        await asyncio.sleep(interval_seconds)
