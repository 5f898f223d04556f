"""Navigation menu seeding: create the empty menu row at startup when missing."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsroom.infrastructure.persistence.repositories.nav_menu_repo import (
    NavMenuRepository,
)
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


async def seed_nav_menu(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """Ensure the single nav menu row exists. Returns True when it was created."""
    async with session_factory() as session:
        async with session.begin():
            created = await NavMenuRepository(session).ensure_exists()
    if created:
        logger.info("Navigation menu seeded (empty)")
    return created
