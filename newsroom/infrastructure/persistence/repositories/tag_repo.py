"""Tag repository: upsert by normalized name and post-count aggregations."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import TagRef, TagResult
from newsroom.infrastructure.persistence.models.tag import Tag, post_tag
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


def _row_to_result(row: Any) -> TagResult:
    return TagResult(
        id=row.id,
        name=row.name,
        post_count=int(row.post_count),
        created_at=ensure_utc(row.created_at),
    )


class TagRepository(BaseRepository[Tag]):
    """Tag repository. Counts are computed from the post_tag association."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Tag)

    def _with_counts(self):
        post_count = func.count(post_tag.c.post_id).label("post_count")
        return (
            select(Tag.id, Tag.name, Tag.created_at, post_count)
            .select_from(Tag)
            .outerjoin(post_tag, post_tag.c.tag_id == Tag.id)
            .group_by(Tag.id, Tag.name, Tag.created_at)
        ), post_count

    async def upsert_many(self, names: list[str]) -> list[TagRef]:
        """Create missing tags; return refs in the order of ``names``.

        Names must already be normalized (trimmed, lower-cased, unique).
        """
        if not names:
            return []
        result = await self.db.execute(select(Tag).where(Tag.name.in_(names)))
        by_name = {tag.name: tag for tag in result.scalars().all()}
        for name in names:
            if name not in by_name:
                by_name[name] = await self.add(Tag(name=name))
        return [TagRef(id=by_name[name].id, name=name) for name in names]

    async def list_with_counts(self) -> list[TagResult]:
        stmt, _ = self._with_counts()
        result = await self.db.execute(stmt.order_by(Tag.created_at.desc()))
        return [_row_to_result(row) for row in result.all()]

    async def search(self, name: str) -> list[TagResult]:
        stmt, _ = self._with_counts()
        result = await self.db.execute(
            stmt.where(Tag.name.contains(name.strip().lower(), autoescape=True)).order_by(
                Tag.name
            )
        )
        return [_row_to_result(row) for row in result.all()]

    async def popular(self, limit: int) -> list[TagResult]:
        stmt, post_count = self._with_counts()
        result = await self.db.execute(
            stmt.order_by(post_count.desc(), Tag.name).limit(limit)
        )
        return [_row_to_result(row) for row in result.all()]

    async def get_by_id(self, tag_id: str) -> TagResult | None:
        stmt, _ = self._with_counts()
        row = (await self.db.execute(stmt.where(Tag.id == tag_id))).one_or_none()
        return _row_to_result(row) if row else None

    async def get_by_name(self, name: str) -> TagResult | None:
        stmt, _ = self._with_counts()
        row = (
            await self.db.execute(stmt.where(Tag.name == name.strip().lower()))
        ).one_or_none()
        return _row_to_result(row) if row else None
