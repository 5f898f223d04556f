"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (nav menu seed, view ledger purge
task, DB engine dispose).
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from newsroom.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, nav menu seed, periodic view-ledger purge task.
    Shutdown: cancel the purge task, dispose the SQL engine.
    """
    from newsroom.infrastructure.persistence import database
    from newsroom.infrastructure.services import run_purge_loop, seed_nav_menu
    from newsroom.shared.telemetry.logging import setup_logging

    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    session_factory = database.get_session_factory()
    await seed_nav_menu(session_factory)

    app.state.view_purge_task = None
    if settings.view_purge_interval_seconds > 0:
        app.state.view_purge_task = asyncio.create_task(
            run_purge_loop(session_factory, settings.view_purge_interval_seconds)
        )
        logger.info(
            "View ledger purge scheduled every %ss", settings.view_purge_interval_seconds
        )

    yield

    # ---- Shutdown ----
    purge_task = getattr(app.state, "view_purge_task", None)
    if purge_task is not None:
        purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge_task
        logger.info("View ledger purge task stopped")

    await database.dispose_engine()
    logger.info("Database engine disposed")
