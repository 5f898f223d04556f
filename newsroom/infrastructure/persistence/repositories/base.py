"""Base repository: generic lookups, create and delete."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_model, count, create and delete.

    Subclasses map ORM rows to application DTOs in their public methods;
    the helpers here work on ORM instances.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None.

        Uses populate_existing so eager relationships are reloaded even when
        the instance is already in the identity map.
        """
        model: Any = self.model
        result = await self.db.execute(
            select(self.model)
            .where(model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def count_where(self, *criteria: Any, model: Any = None) -> int:
        """Return the number of rows of model (default: this repo's model) matching criteria."""
        result = await self.db.execute(
            select(func.count()).select_from(model or self.model).where(*criteria)
        )
        return int(result.scalar_one())

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush, no commit)."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Flush pending changes of an attached record."""
        await self.db.flush()
        return obj

    async def remove(self, obj: ModelType) -> None:
        """Delete the record (flush, no commit)."""
        await self.db.delete(obj)
        await self.db.flush()
