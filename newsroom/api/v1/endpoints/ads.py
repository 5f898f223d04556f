"""Advertisement API: public listing, admin multipart writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_ad_service,
    get_ad_service_for_write,
    spooled_upload,
)
from newsroom.application.use_cases.content import AdService
from newsroom.core.limiter import limit_writes
from newsroom.schemas.common import Envelope, ListEnvelope, MessageResponse
from newsroom.schemas.content import AdResponse

router = APIRouter()


@router.get("", response_model=ListEnvelope[AdResponse])
async def list_ads(
    ad_svc: Annotated[AdService, Depends(get_ad_service)],
    ad_type: str | None = Query(None, alias="type", description="horizontal or square"),
    is_active: bool | None = Query(None),
):
    ads = await ad_svc.list_all(ad_type, is_active)
    return ListEnvelope[AdResponse](
        count=len(ads), data=[AdResponse.model_validate(a) for a in ads]
    )


@router.post("", response_model=Envelope[AdResponse], status_code=201)
@limit_writes
async def create_ad(
    request: Request,
    _admin: CurrentAdmin,
    ad_svc: Annotated[AdService, Depends(get_ad_service_for_write)],
    title: str = Form(...),
    ad_type: str = Form(..., alias="type"),
    link: str = Form(...),
    image: UploadFile = File(...),
    is_active: bool = Form(True),
):
    async with spooled_upload(image) as image_path:
        ad = await ad_svc.create(title, ad_type, link, image_path, is_active)
    return Envelope[AdResponse](
        message="Ad created successfully", data=AdResponse.model_validate(ad)
    )


@router.put("/{ad_id}", response_model=Envelope[AdResponse])
@limit_writes
async def update_ad(
    request: Request,
    ad_id: str,
    _admin: CurrentAdmin,
    ad_svc: Annotated[AdService, Depends(get_ad_service_for_write)],
    title: str | None = Form(None),
    ad_type: str | None = Form(None, alias="type"),
    link: str | None = Form(None),
    is_active: bool | None = Form(None),
    image: UploadFile | None = File(None),
):
    fields = {"title": title, "ad_type": ad_type, "link": link, "is_active": is_active}
    if image is not None and image.filename:
        async with spooled_upload(image) as image_path:
            ad = await ad_svc.update(ad_id, image_path=image_path, **fields)
    else:
        ad = await ad_svc.update(ad_id, **fields)
    return Envelope[AdResponse](
        message="Ad updated successfully", data=AdResponse.model_validate(ad)
    )


@router.patch("/{ad_id}/toggle", response_model=Envelope[AdResponse])
@limit_writes
async def toggle_ad(
    request: Request,
    ad_id: str,
    _admin: CurrentAdmin,
    ad_svc: Annotated[AdService, Depends(get_ad_service_for_write)],
):
    ad = await ad_svc.toggle(ad_id)
    return Envelope[AdResponse](
        message=f"Ad {'activated' if ad.is_active else 'deactivated'} successfully",
        data=AdResponse.model_validate(ad),
    )


@router.delete("/{ad_id}", response_model=MessageResponse)
@limit_writes
async def delete_ad(
    request: Request,
    ad_id: str,
    _admin: CurrentAdmin,
    ad_svc: Annotated[AdService, Depends(get_ad_service_for_write)],
):
    await ad_svc.delete(ad_id)
    return MessageResponse(message="Ad deleted successfully")
