"""Standalone image upload for images embedded in post content."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_image_upload_service,
    spooled_upload,
)
from newsroom.application.use_cases.content import ImageUploadService
from newsroom.core.limiter import limit_upload
from newsroom.schemas.content import ImageResponse

router = APIRouter()


@router.post("", response_model=ImageResponse, status_code=201)
@limit_upload
async def upload_image(
    request: Request,
    _admin: CurrentAdmin,
    upload_svc: Annotated[ImageUploadService, Depends(get_image_upload_service)],
    image: UploadFile = File(...),
):
    async with spooled_upload(image) as image_path:
        stored = await upload_svc.upload(image_path)
    return ImageResponse.model_validate(stored)
