"""Repository dependencies (composition root).

Read repositories share the request's get_db session; write repositories
share the get_db_transactional session so one request commits atomically.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.infrastructure.persistence.database import get_db, get_db_transactional
from newsroom.infrastructure.persistence.repositories import (
    AdminRepository,
    PostViewRepository,
)

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]


async def get_admin_repo(db: ReadSession) -> AdminRepository:
    """Admin repository; reset-state writes commit on their own (compare-and-swap)."""
    return AdminRepository(db)


async def get_trending_queries(db: ReadSession) -> PostViewRepository:
    return PostViewRepository(db)
