"""Post API: public feed, search, trending and filters; admin multipart writes.

GET /{post_id} runs the view-tracking pre-step before the post is read.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_post_service,
    get_post_service_for_write,
    get_trending_service,
    spooled_upload,
    track_post_view,
)
from newsroom.application.dtos.content import PostCreate, PostUpdate
from newsroom.application.services import TrendingService
from newsroom.application.use_cases.common import page_request
from newsroom.application.use_cases.content import PostService, parse_tag_names
from newsroom.core.constants import DEFAULT_PAGE_SIZE, EMPTY_FORM_VALUES
from newsroom.core.limiter import limit_writes
from newsroom.schemas.common import (
    Envelope,
    ListEnvelope,
    MessageResponse,
    PageEnvelope,
    Pagination,
)
from newsroom.schemas.content import PostFilterMeta, PostResponse, TrendingPostResponse

router = APIRouter()


class PostFilterEnvelope(PageEnvelope[PostResponse]):
    meta: PostFilterMeta


@router.get("", response_model=ListEnvelope[PostResponse])
async def list_posts(
    post_svc: Annotated[PostService, Depends(get_post_service)],
    is_draft: bool = Query(False, description="true lists drafts instead of published posts"),
):
    """Published posts (or drafts), newest first."""
    posts = await post_svc.list_feed(is_draft)
    return ListEnvelope[PostResponse](
        count=len(posts), data=[PostResponse.model_validate(p) for p in posts]
    )


@router.get("/search", response_model=PageEnvelope[PostResponse])
async def search_posts(
    post_svc: Annotated[PostService, Depends(get_post_service)],
    query: str | None = Query(None, max_length=200),
    category_name: str | None = Query(None, max_length=100),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
):
    """Case-insensitive match on title/content, optionally inside one category."""
    result = await post_svc.search(query, category_name, page_request(page, limit))
    return PageEnvelope[PostResponse](
        data=[PostResponse.model_validate(p) for p in result.items],
        pagination=Pagination.from_info(result.info),
    )


@router.get("/trending", response_model=Envelope[list[TrendingPostResponse]])
async def trending_posts(
    trending_svc: Annotated[TrendingService, Depends(get_trending_service)],
):
    """Up to TRENDING_LIMIT posts: last 24h views, then 7 days, then newest."""
    items = await trending_svc.get_trending()
    return Envelope[list[TrendingPostResponse]](
        data=[TrendingPostResponse.model_validate(i) for i in items]
    )


@router.get("/filter/{filter_id}", response_model=PostFilterEnvelope)
async def filter_posts(
    filter_id: str,
    post_svc: Annotated[PostService, Depends(get_post_service)],
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
):
    """Published posts for ``all``, a category id, or a tag id."""
    result = await post_svc.filter(filter_id, page_request(page, limit))
    return PostFilterEnvelope(
        data=[PostResponse.model_validate(p) for p in result.page.items],
        pagination=Pagination.from_info(result.page.info),
        meta=PostFilterMeta(
            filter_type=result.filter_type.value,
            filter_name=result.filter_name,
            filter_id=result.filter_id,
        ),
    )


@router.get(
    "/{post_id}",
    response_model=Envelope[PostResponse],
    dependencies=[Depends(track_post_view)],
)
async def get_post(
    post_id: str,
    post_svc: Annotated[PostService, Depends(get_post_service)],
):
    post = await post_svc.get(post_id)
    return Envelope[PostResponse](data=PostResponse.model_validate(post))


@router.post("", response_model=Envelope[PostResponse], status_code=201)
@limit_writes
async def create_post(
    request: Request,
    _admin: CurrentAdmin,
    post_svc: Annotated[PostService, Depends(get_post_service_for_write)],
    title: str = Form(...),
    content: str = Form(...),
    category: str = Form(..., description="Category id"),
    image: UploadFile = File(...),
    sub_category: str | None = Form(None),
    tags: str | None = Form(None, description="JSON array or comma-separated names"),
    is_draft: bool = Form(False),
    is_favourite: bool = Form(False),
):
    data = PostCreate(
        title=title,
        content=content,
        category_id=category.strip(),
        sub_category_id=(
            None if (sub_category or "").strip() in EMPTY_FORM_VALUES else sub_category.strip()
        ),
        tag_names=parse_tag_names(tags),
        is_draft=is_draft,
        is_favourite=is_favourite,
    )
    async with spooled_upload(image) as image_path:
        post = await post_svc.create(data, image_path)
    return Envelope[PostResponse](message="Post created", data=PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=Envelope[PostResponse])
@limit_writes
async def update_post(
    request: Request,
    post_id: str,
    _admin: CurrentAdmin,
    post_svc: Annotated[PostService, Depends(get_post_service_for_write)],
    title: str | None = Form(None),
    content: str | None = Form(None),
    category: str | None = Form(None),
    sub_category: str | None = Form(None),
    tags: str | None = Form(None),
    is_draft: bool | None = Form(None),
    is_favourite: bool | None = Form(None),
    image: UploadFile | None = File(None),
):
    """Partial update; fields not sent are left unchanged."""
    clear_sub_category = sub_category is not None and sub_category.strip() in EMPTY_FORM_VALUES
    data = PostUpdate(
        title=title,
        content=content,
        category_id=category.strip() if category else None,
        sub_category_id=None if clear_sub_category or sub_category is None else sub_category.strip(),
        clear_sub_category=clear_sub_category,
        tag_names=parse_tag_names(tags) if tags is not None else None,
        is_draft=is_draft,
        is_favourite=is_favourite,
    )
    if image is not None and image.filename:
        async with spooled_upload(image) as image_path:
            post = await post_svc.update(post_id, data, image_path)
    else:
        post = await post_svc.update(post_id, data)
    return Envelope[PostResponse](message="Post updated", data=PostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=MessageResponse)
@limit_writes
async def delete_post(
    request: Request,
    post_id: str,
    _admin: CurrentAdmin,
    post_svc: Annotated[PostService, Depends(get_post_service_for_write)],
):
    """Delete the post and its image."""
    await post_svc.delete(post_id)
    return MessageResponse(message="Post deleted successfully")
