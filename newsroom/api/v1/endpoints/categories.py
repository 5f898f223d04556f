"""Category API: public reads, admin writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_category_service,
    get_category_service_for_write,
)
from newsroom.application.use_cases.content import CategoryService
from newsroom.core.limiter import limit_writes
from newsroom.schemas.common import Envelope, ListEnvelope, MessageResponse
from newsroom.schemas.content import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter()


@router.get("", response_model=ListEnvelope[CategoryResponse])
async def list_categories(
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    """Active categories with their subcategories, newest first."""
    categories = await category_svc.list_active()
    return ListEnvelope[CategoryResponse](
        count=len(categories),
        data=[CategoryResponse.model_validate(c) for c in categories],
    )


@router.get("/slug/{slug}", response_model=Envelope[CategoryResponse])
async def get_category_by_slug(
    slug: str,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    category = await category_svc.get_by_slug(slug)
    return Envelope[CategoryResponse](data=CategoryResponse.model_validate(category))


@router.get("/{category_id}", response_model=Envelope[CategoryResponse])
async def get_category(
    category_id: str,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    category = await category_svc.get(category_id)
    return Envelope[CategoryResponse](data=CategoryResponse.model_validate(category))


@router.post("", response_model=Envelope[CategoryResponse], status_code=201)
@limit_writes
async def create_category(
    request: Request,
    body: CategoryCreate,
    _admin: CurrentAdmin,
    category_svc: Annotated[CategoryService, Depends(get_category_service_for_write)],
):
    category = await category_svc.create(body.name, body.description)
    return Envelope[CategoryResponse](
        message="Category created successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.put("/{category_id}", response_model=Envelope[CategoryResponse])
@limit_writes
async def update_category(
    request: Request,
    category_id: str,
    body: CategoryUpdate,
    _admin: CurrentAdmin,
    category_svc: Annotated[CategoryService, Depends(get_category_service_for_write)],
):
    category = await category_svc.update(
        category_id,
        name=body.name,
        description=body.description,
        is_active=body.is_active,
    )
    return Envelope[CategoryResponse](
        message="Category updated successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.patch("/{category_id}/toggle", response_model=Envelope[CategoryResponse])
@limit_writes
async def toggle_category(
    request: Request,
    category_id: str,
    _admin: CurrentAdmin,
    category_svc: Annotated[CategoryService, Depends(get_category_service_for_write)],
):
    category = await category_svc.toggle(category_id)
    state = "activated" if category.is_active else "deactivated"
    return Envelope[CategoryResponse](
        message=f"Category {state} successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.delete("/{category_id}", response_model=MessageResponse)
@limit_writes
async def delete_category(
    request: Request,
    category_id: str,
    _admin: CurrentAdmin,
    category_svc: Annotated[CategoryService, Depends(get_category_service_for_write)],
):
    """Delete a category that has no subcategories and no posts."""
    await category_svc.delete(category_id)
    return MessageResponse(message="Category deleted successfully")
