"""Tag API (public, read-only). Tags are created through post writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from newsroom.api.v1.dependencies import get_tag_service
from newsroom.application.use_cases.common import page_request
from newsroom.application.use_cases.content import TagService
from newsroom.core.constants import DEFAULT_PAGE_SIZE
from newsroom.schemas.common import Envelope, ListEnvelope, PageEnvelope, Pagination
from newsroom.schemas.content import PostResponse, TagResponse

router = APIRouter()


class TagPostsEnvelope(PageEnvelope[PostResponse]):
    tag_name: str


@router.get("", response_model=ListEnvelope[TagResponse])
async def list_tags(tag_svc: Annotated[TagService, Depends(get_tag_service)]):
    """All tags with the number of posts carrying each."""
    tags = await tag_svc.list_all()
    return ListEnvelope[TagResponse](
        count=len(tags), data=[TagResponse.model_validate(t) for t in tags]
    )


@router.get("/search", response_model=ListEnvelope[TagResponse])
async def search_tags(
    tag_svc: Annotated[TagService, Depends(get_tag_service)],
    name: str | None = Query(None, max_length=100),
):
    tags = await tag_svc.search(name)
    return ListEnvelope[TagResponse](
        count=len(tags), data=[TagResponse.model_validate(t) for t in tags]
    )


@router.get("/popular", response_model=ListEnvelope[TagResponse])
async def popular_tags(
    tag_svc: Annotated[TagService, Depends(get_tag_service)],
    limit: int = Query(10, ge=1, le=100),
):
    tags = await tag_svc.popular(limit)
    return ListEnvelope[TagResponse](
        count=len(tags), data=[TagResponse.model_validate(t) for t in tags]
    )


@router.get("/posts", response_model=TagPostsEnvelope)
async def posts_by_tag(
    tag_svc: Annotated[TagService, Depends(get_tag_service)],
    tag_name: str | None = Query(None, max_length=100),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
):
    """Posts carrying a tag; an unknown tag yields an empty page."""
    result = await tag_svc.posts_by_tag(tag_name, page_request(page, limit))
    return TagPostsEnvelope(
        tag_name=result.tag_name,
        data=[PostResponse.model_validate(p) for p in result.page.items],
        pagination=Pagination.from_info(result.page.info),
    )


@router.get("/{tag_id}", response_model=Envelope[TagResponse])
async def get_tag(tag_id: str, tag_svc: Annotated[TagService, Depends(get_tag_service)]):
    tag = await tag_svc.get(tag_id)
    return Envelope[TagResponse](data=TagResponse.model_validate(tag))
