"""Tag use cases and tag-list parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass

from newsroom.application.dtos.content import PostResult, TagResult
from newsroom.application.dtos.pagination import Page, PageInfo
from newsroom.application.interfaces.repositories import IPostRepository, ITagRepository
from newsroom.application.use_cases.common import require_object_id
from newsroom.domain.exceptions import ResourceNotFoundException, ValidationException


def parse_tag_names(raw: str | list[str] | None) -> list[str]:
    """Normalize tags given as a list, a JSON array string, or a comma string.

    Names are trimmed and lower-cased; blanks are dropped and duplicates
    removed keeping first occurrence.
    """
    if not raw:
        return []
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = raw.split(",")
        names = parsed if isinstance(parsed, list) else [raw]
    else:
        names = raw
    cleaned = (str(name).strip().lower() for name in names)
    return list(dict.fromkeys(name for name in cleaned if name))


@dataclass(frozen=True)
class TaggedPosts:
    """Posts of one tag; tag_name echoes the query when the tag is unknown."""

    tag_name: str
    page: Page[PostResult]


class TagService:
    def __init__(self, tag_repo: ITagRepository, post_repo: IPostRepository) -> None:
        self.tag_repo = tag_repo
        self.post_repo = post_repo

    async def list_all(self) -> list[TagResult]:
        return await self.tag_repo.list_with_counts()

    async def search(self, name: str | None) -> list[TagResult]:
        if not name or not name.strip():
            raise ValidationException("Search name is required", field="name")
        return await self.tag_repo.search(name)

    async def popular(self, limit: int) -> list[TagResult]:
        return await self.tag_repo.popular(max(1, limit))

    async def get(self, tag_id: str) -> TagResult:
        require_object_id(tag_id, "tag")
        tag = await self.tag_repo.get_by_id(tag_id)
        if tag is None:
            raise ResourceNotFoundException("tag", tag_id)
        return tag

    async def posts_by_tag(self, tag_name: str | None, page: PageInfo) -> TaggedPosts:
        if not tag_name or not tag_name.strip():
            raise ValidationException("Tag name is required", field="tag_name")
        tag = await self.tag_repo.get_by_name(tag_name)
        if tag is None:
            empty = Page(items=[], info=PageInfo(total=0, page=page.page, limit=page.limit))
            return TaggedPosts(tag_name=tag_name, page=empty)
        return TaggedPosts(
            tag_name=tag.name, page=await self.post_repo.list_by_tag(tag.id, page)
        )
