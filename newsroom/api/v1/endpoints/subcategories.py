"""SubCategory API: public reads, admin writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_sub_category_service,
    get_sub_category_service_for_write,
)
from newsroom.application.use_cases.content import SubCategoryService
from newsroom.core.limiter import limit_writes
from newsroom.schemas.common import Envelope, ListEnvelope, MessageResponse
from newsroom.schemas.content import (
    SubCategoryCreate,
    SubCategoryResponse,
    SubCategoryUpdate,
)

router = APIRouter()


@router.get("", response_model=ListEnvelope[SubCategoryResponse])
async def list_sub_categories(
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service)],
    is_active: bool | None = Query(None),
    category_id: str | None = Query(None),
):
    items = await sub_svc.list_all(is_active, category_id)
    return ListEnvelope[SubCategoryResponse](
        count=len(items), data=[SubCategoryResponse.model_validate(s) for s in items]
    )


@router.get("/slug/{category_id}/{slug}", response_model=Envelope[SubCategoryResponse])
async def get_sub_category_by_slug(
    category_id: str,
    slug: str,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service)],
):
    item = await sub_svc.get_by_slug(category_id, slug)
    return Envelope[SubCategoryResponse](data=SubCategoryResponse.model_validate(item))


@router.get("/{sub_category_id}", response_model=Envelope[SubCategoryResponse])
async def get_sub_category(
    sub_category_id: str,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service)],
):
    item = await sub_svc.get(sub_category_id)
    return Envelope[SubCategoryResponse](data=SubCategoryResponse.model_validate(item))


@router.post("", response_model=Envelope[SubCategoryResponse], status_code=201)
@limit_writes
async def create_sub_category(
    request: Request,
    body: SubCategoryCreate,
    _admin: CurrentAdmin,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service_for_write)],
):
    item = await sub_svc.create(body.name, body.category_id, body.is_active)
    return Envelope[SubCategoryResponse](
        message="SubCategory created successfully",
        data=SubCategoryResponse.model_validate(item),
    )


@router.put("/{sub_category_id}", response_model=Envelope[SubCategoryResponse])
@limit_writes
async def update_sub_category(
    request: Request,
    sub_category_id: str,
    body: SubCategoryUpdate,
    _admin: CurrentAdmin,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service_for_write)],
):
    item = await sub_svc.update(
        sub_category_id,
        name=body.name,
        category_id=body.category_id,
        is_active=body.is_active,
    )
    return Envelope[SubCategoryResponse](
        message="SubCategory updated successfully",
        data=SubCategoryResponse.model_validate(item),
    )


@router.patch("/{sub_category_id}/toggle", response_model=Envelope[SubCategoryResponse])
@limit_writes
async def toggle_sub_category(
    request: Request,
    sub_category_id: str,
    _admin: CurrentAdmin,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service_for_write)],
):
    item = await sub_svc.toggle(sub_category_id)
    return Envelope[SubCategoryResponse](
        message="SubCategory status updated",
        data=SubCategoryResponse.model_validate(item),
    )


@router.delete("/{sub_category_id}", response_model=MessageResponse)
@limit_writes
async def delete_sub_category(
    request: Request,
    sub_category_id: str,
    _admin: CurrentAdmin,
    sub_svc: Annotated[SubCategoryService, Depends(get_sub_category_service_for_write)],
):
    await sub_svc.delete(sub_category_id)
    return MessageResponse(message="SubCategory deleted successfully")
