"""View ledger: de-duplicated view recording, trending aggregations and purge."""

from datetime import datetime
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsroom.application.dtos.content import StoredImage
from newsroom.application.dtos.trending import TrendingCategory, TrendingPostItem
from newsroom.infrastructure.persistence.models.category import Category
from newsroom.infrastructure.persistence.models.post import Post
from newsroom.infrastructure.persistence.models.post_view import PostView
from newsroom.shared.utils.datetime import ensure_utc


class PostViewLedger:
    """IPostViewLedger over a session factory.

    Each operation opens its own session so record_view and increment_views
    can run concurrently (asyncio.gather) without sharing a connection.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def should_count(self, post_id: str, viewer_ip: str, since: datetime) -> bool:
        async with self._session_factory() as session:
            post_found = await session.scalar(select(Post.id).where(Post.id == post_id))
            if post_found is None:
                return False
            recent = await session.scalar(
                select(PostView.id)
                .where(
                    PostView.post_id == post_id,
                    PostView.viewer_ip == viewer_ip,
                    PostView.created_at >= since,
                )
                .limit(1)
            )
            return recent is None

    async def record_view(self, post_id: str, viewer_ip: str) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                session.add(PostView(post_id=post_id, viewer_ip=viewer_ip))

    async def increment_views(self, post_id: str) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(
                    update(Post)
                    .where(Post.id == post_id)
                    .values(views=Post.views + 1, updated_at=Post.updated_at)
                    .execution_options(synchronize_session=False)
                )


def _trending_item(row: Any, view_count: int) -> TrendingPostItem:
    return TrendingPostItem(
        id=row.id,
        view_count=view_count,
        title=row.title,
        image=StoredImage(url=row.image_url, public_id=row.image_public_id),
        created_at=ensure_utc(row.created_at),
        slug=row.slug,
        category=TrendingCategory(
            name=row.category_name or "", slug=row.category_slug or ""
        ),
    )


_POST_COLUMNS = (
    Post.id,
    Post.title,
    Post.image_url,
    Post.image_public_id,
    Post.created_at,
    Post.slug,
    Category.name.label("category_name"),
    Category.slug.label("category_slug"),
)


class PostViewRepository:
    """ITrendingQueries over a request-scoped session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def most_viewed_since(
        self, since: datetime, exclude_ids: list[str], limit: int
    ) -> list[TrendingPostItem]:
        """Count ledger rows per post since ``since``.

        Drafts are filtered before the limit is applied, so a popular draft
        never takes a slot from a published post.
        """
        if limit <= 0:
            return []
        view_count = func.count(PostView.id).label("view_count")
        stmt = (
            select(*_POST_COLUMNS, view_count)
            .select_from(PostView)
            .join(Post, Post.id == PostView.post_id)
            .outerjoin(Category, Category.id == Post.category_id)
            .where(PostView.created_at >= since, Post.is_draft.is_(False))
            .group_by(*_POST_COLUMNS)
            .order_by(view_count.desc(), Post.created_at.desc())
            .limit(limit)
        )
        if exclude_ids:
            stmt = stmt.where(PostView.post_id.not_in(exclude_ids))
        result = await self.db.execute(stmt)
        return [_trending_item(row, int(row.view_count)) for row in result.all()]

    async def latest_posts(
        self, exclude_ids: list[str], limit: int
    ) -> list[TrendingPostItem]:
        if limit <= 0:
            return []
        stmt = (
            select(*_POST_COLUMNS)
            .select_from(Post)
            .outerjoin(Category, Category.id == Post.category_id)
            .where(Post.is_draft.is_(False))
            .order_by(Post.created_at.desc())
            .limit(limit)
        )
        if exclude_ids:
            stmt = stmt.where(Post.id.not_in(exclude_ids))
        result = await self.db.execute(stmt)
        return [_trending_item(row, 0) for row in result.all()]

    async def purge_older_than(self, cutoff: datetime) -> int:
        result = await self.db.execute(
            delete(PostView)
            .where(PostView.created_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        return int(result.rowcount or 0)
