"""Post repository. Interface methods return application DTOs."""

from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import (
    CategoryRef,
    PostCreate,
    PostResult,
    PostUpdate,
    StoredImage,
    TagRef,
)
from newsroom.application.dtos.pagination import Page, PageInfo
from newsroom.infrastructure.persistence.models.post import Post
from newsroom.infrastructure.persistence.models.tag import Tag
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


def _ref(obj: Any) -> CategoryRef | None:
    if obj is None:
        return None
    return CategoryRef(id=obj.id, name=obj.name, slug=obj.slug)


def post_to_result(p: Post) -> PostResult:
    """Map ORM Post (with eager relationships) to PostResult."""
    return PostResult(
        id=p.id,
        title=p.title,
        slug=p.slug,
        content=p.content,
        image=StoredImage(url=p.image_url, public_id=p.image_public_id),
        category=_ref(p.category),
        sub_category=_ref(p.sub_category),
        tags=[TagRef(id=t.id, name=t.name) for t in p.tags],
        is_draft=p.is_draft,
        is_favourite=p.is_favourite,
        views=p.views,
        created_at=ensure_utc(p.created_at),
        updated_at=ensure_utc(p.updated_at),
    )


class PostRepository(BaseRepository[Post]):
    """Post repository. Category, subcategory and tags load eagerly."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Post)

    async def _page(self, criteria: list[Any], page: PageInfo) -> Page[PostResult]:
        total = await self.count_where(*criteria)
        result = await self.db.execute(
            select(Post)
            .where(*criteria)
            .order_by(Post.created_at.desc())
            .offset(page.skip)
            .limit(page.limit)
        )
        items = [post_to_result(p) for p in result.unique().scalars().all()]
        return Page(items=items, info=PageInfo(total=total, page=page.page, limit=page.limit))

    async def _load_tags(self, tag_ids: list[str]) -> list[Tag]:
        if not tag_ids:
            return []
        result = await self.db.execute(select(Tag).where(Tag.id.in_(tag_ids)))
        return list(result.scalars().all())

    async def get_by_id(self, post_id: str) -> PostResult | None:
        post = await self.get_model(post_id)
        return post_to_result(post) if post else None

    async def list_feed(self, is_draft: bool) -> list[PostResult]:
        result = await self.db.execute(
            select(Post)
            .where(Post.is_draft.is_(is_draft))
            .order_by(Post.created_at.desc())
        )
        return [post_to_result(p) for p in result.unique().scalars().all()]

    async def search(
        self, query: str | None, category_id: str | None, page: PageInfo
    ) -> Page[PostResult]:
        criteria: list[Any] = [Post.is_draft.is_(False)]
        if query:
            criteria.append(
                or_(
                    Post.title.icontains(query, autoescape=True),
                    Post.content.icontains(query, autoescape=True),
                )
            )
        if category_id:
            criteria.append(Post.category_id == category_id)
        return await self._page(criteria, page)

    async def list_filtered(
        self, category_id: str | None, tag_id: str | None, page: PageInfo
    ) -> Page[PostResult]:
        criteria: list[Any] = [Post.is_draft.is_(False)]
        if category_id:
            criteria.append(Post.category_id == category_id)
        if tag_id:
            criteria.append(Post.tags.any(Tag.id == tag_id))
        return await self._page(criteria, page)

    async def list_by_tag(self, tag_id: str, page: PageInfo) -> Page[PostResult]:
        """All posts carrying a tag (drafts included), newest first."""
        return await self._page([Post.tags.any(Tag.id == tag_id)], page)

    async def create(
        self, data: PostCreate, slug: str, image: StoredImage, tag_ids: list[str]
    ) -> PostResult:
        post = Post(
            title=data.title,
            slug=slug,
            content=data.content,
            image_url=image.url,
            image_public_id=image.public_id,
            category_id=data.category_id,
            sub_category_id=data.sub_category_id,
            is_draft=data.is_draft,
            is_favourite=data.is_favourite,
        )
        post.tags = await self._load_tags(tag_ids)
        await self.add(post)
        return await self.get_by_id(post.id)

    async def update(
        self,
        post_id: str,
        data: PostUpdate,
        slug: str | None,
        image: StoredImage | None,
        tag_ids: list[str] | None,
    ) -> PostResult | None:
        post = await self.get_model(post_id)
        if post is None:
            return None
        if data.title is not None:
            post.title = data.title
        if slug is not None:
            post.slug = slug
        if data.content is not None:
            post.content = data.content
        if data.category_id is not None:
            post.category_id = data.category_id
        if data.clear_sub_category:
            post.sub_category_id = None
        elif data.sub_category_id is not None:
            post.sub_category_id = data.sub_category_id
        if tag_ids is not None:
            post.tags = await self._load_tags(tag_ids)
        if data.is_draft is not None:
            post.is_draft = data.is_draft
        if data.is_favourite is not None:
            post.is_favourite = data.is_favourite
        if image is not None:
            post.image_url = image.url
            post.image_public_id = image.public_id
        await self.save(post)
        return await self.get_by_id(post_id)

    async def delete(self, post_id: str) -> bool:
        post = await self.get_model(post_id)
        if post is None:
            return False
        await self.remove(post)
        return True

