"""Post use cases: feed, lookup, search, filter and image-backed writes.

Writes upload the image first. If the database write fails afterwards the
new image is deleted again; a replaced image is deleted only after the
write went through.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from newsroom.application.dtos.content import PostCreate, PostResult, PostUpdate
from newsroom.application.dtos.pagination import Page, PageInfo
from newsroom.application.interfaces.repositories import (
    ICategoryRepository,
    IPostRepository,
    ISubCategoryRepository,
    ITagRepository,
)
from newsroom.application.interfaces.services import IImageStore
from newsroom.application.use_cases.common import require_object_id
from newsroom.core.constants import POST_IMAGE_FOLDER, POST_TITLE_MIN_LENGTH
from newsroom.domain.enums import PostFilterType
from newsroom.domain.exceptions import ResourceNotFoundException, ValidationException
from newsroom.shared.telemetry.logging import get_logger
from newsroom.shared.utils.generators import is_object_id
from newsroom.shared.utils.slugs import make_slug

logger = get_logger(__name__)


@dataclass(frozen=True)
class PostFilterResult:
    page: Page[PostResult]
    filter_type: PostFilterType
    filter_name: str
    filter_id: str


class PostService:
    def __init__(
        self,
        post_repo: IPostRepository,
        category_repo: ICategoryRepository,
        sub_category_repo: ISubCategoryRepository,
        tag_repo: ITagRepository,
        image_store: IImageStore,
    ) -> None:
        self.post_repo = post_repo
        self.category_repo = category_repo
        self.sub_category_repo = sub_category_repo
        self.tag_repo = tag_repo
        self.image_store = image_store

    # -- reads -------------------------------------------------------------

    async def list_feed(self, is_draft: bool = False) -> list[PostResult]:
        return await self.post_repo.list_feed(is_draft)

    async def get(self, post_id: str) -> PostResult:
        require_object_id(post_id, "post")
        post = await self.post_repo.get_by_id(post_id)
        if post is None:
            raise ResourceNotFoundException("post", post_id)
        return post

    async def search(
        self, query: str | None, category_name: str | None, page: PageInfo
    ) -> Page[PostResult]:
        """Match query in title/content; category_name picks the first matching category.

        An unknown category yields an empty page rather than an error.
        """
        category_id = None
        if category_name and category_name.strip():
            category = await self.category_repo.find_by_name(category_name.strip())
            if category is None:
                return Page(items=[], info=PageInfo(total=0, page=page.page, limit=page.limit))
            category_id = category.id
        query = query.strip() if query else None
        return await self.post_repo.search(query or None, category_id, page)

    async def filter(self, filter_id: str, page: PageInfo) -> PostFilterResult:
        """Published posts for ``all``, a category id or a tag id."""
        if filter_id == PostFilterType.ALL.value:
            return PostFilterResult(
                page=await self.post_repo.list_filtered(None, None, page),
                filter_type=PostFilterType.ALL,
                filter_name="All Posts",
                filter_id=filter_id,
            )
        if not is_object_id(filter_id):
            raise ValidationException(
                "Invalid ID format. Must be a valid id or 'all'.", field="id"
            )
        category = await self.category_repo.get_by_id(filter_id)
        if category is not None:
            return PostFilterResult(
                page=await self.post_repo.list_filtered(category.id, None, page),
                filter_type=PostFilterType.CATEGORY,
                filter_name=category.name,
                filter_id=filter_id,
            )
        tag = await self.tag_repo.get_by_id(filter_id)
        if tag is not None:
            return PostFilterResult(
                page=await self.post_repo.list_filtered(None, tag.id, page),
                filter_type=PostFilterType.TAG,
                filter_name=tag.name,
                filter_id=filter_id,
            )
        raise ResourceNotFoundException(
            "filter", filter_id, "No category or tag found with this ID"
        )

    # -- validation --------------------------------------------------------

    @staticmethod
    def _validate_title(title: str) -> str:
        title = title.strip()
        if len(title) < POST_TITLE_MIN_LENGTH:
            raise ValidationException(
                f"Title must be at least {POST_TITLE_MIN_LENGTH} characters long",
                field="title",
            )
        return title

    async def _validate_category(self, category_id: str) -> None:
        if not is_object_id(category_id) or (
            await self.category_repo.get_by_id(category_id) is None
        ):
            raise ValidationException("Invalid Category ID", field="category")

    async def _validate_sub_category(self, sub_category_id: str) -> None:
        if not is_object_id(sub_category_id) or (
            await self.sub_category_repo.get_by_id(sub_category_id) is None
        ):
            raise ValidationException("Invalid SubCategory ID", field="sub_category")

    async def _tag_ids(self, tag_names: list[str]) -> list[str]:
        return [tag.id for tag in await self.tag_repo.upsert_many(tag_names)]

    # -- writes ------------------------------------------------------------

    async def create(self, data: PostCreate, image_path: str) -> PostResult:
        data = replace(data, title=self._validate_title(data.title))
        if not data.content.strip():
            raise ValidationException("Content is required", field="content")
        await self._validate_category(data.category_id)
        if data.sub_category_id:
            await self._validate_sub_category(data.sub_category_id)

        image = await self.image_store.upload(image_path, POST_IMAGE_FOLDER)
        try:
            tag_ids = await self._tag_ids(data.tag_names)
            created = await self.post_repo.create(
                data, make_slug(data.title), image, tag_ids
            )
        except Exception:
            logger.warning("Post create failed; removing uploaded image %s", image.public_id)
            await self.image_store.delete(image.public_id)
            raise
        logger.info("Post created: id=%s", created.id)
        return created

    async def update(
        self, post_id: str, data: PostUpdate, image_path: str | None = None
    ) -> PostResult:
        existing = await self.get(post_id)
        slug = None
        if data.title is not None:
            data = replace(data, title=self._validate_title(data.title))
            slug = make_slug(data.title)
        if data.category_id is not None:
            await self._validate_category(data.category_id)
        if data.sub_category_id is not None and not data.clear_sub_category:
            await self._validate_sub_category(data.sub_category_id)

        image = None
        if image_path is not None:
            image = await self.image_store.upload(image_path, POST_IMAGE_FOLDER)
        try:
            tag_ids = None
            if data.tag_names is not None:
                tag_ids = await self._tag_ids(data.tag_names)
            updated = await self.post_repo.update(post_id, data, slug, image, tag_ids)
        except Exception:
            if image is not None:
                logger.warning(
                    "Post update failed; removing uploaded image %s", image.public_id
                )
                await self.image_store.delete(image.public_id)
            raise
        if updated is None:
            if image is not None:
                await self.image_store.delete(image.public_id)
            raise ResourceNotFoundException("post", post_id)
        if image is not None and existing.image.public_id:
            await self.image_store.delete(existing.image.public_id)
        return updated

    async def delete(self, post_id: str) -> None:
        post = await self.get(post_id)
        await self.post_repo.delete(post_id)
        if post.image.public_id:
            await self.image_store.delete(post.image.public_id)
        logger.info("Post deleted: id=%s", post_id)
