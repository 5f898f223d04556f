"""Cloudinary image store. The SDK is synchronous; calls run in a worker thread."""

from __future__ import annotations

import asyncio
from typing import Any

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from newsroom.application.dtos.content import StoredImage
from newsroom.infrastructure.exceptions import ImageUploadError
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Images are bounded to the social-card size; smaller images are left alone.
UPLOAD_TRANSFORMATION = [{"width": 1200, "height": 630, "crop": "limit"}]


class CloudinaryImageStore:
    """IImageStore backed by Cloudinary."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    async def upload(self, path: str, folder: str) -> StoredImage:
        try:
            result: dict[str, Any] = await asyncio.to_thread(
                cloudinary.uploader.upload,
                path,
                folder=folder,
                transformation=UPLOAD_TRANSFORMATION,
            )
        except (CloudinaryError, OSError) as e:
            logger.error("Cloudinary upload error: %s", e)
            raise ImageUploadError(str(e)) from e
        url = result.get("secure_url")
        public_id = result.get("public_id")
        if not url or not public_id:
            raise ImageUploadError("Cloudinary response missing secure_url/public_id")
        return StoredImage(url=url, public_id=public_id)

    async def delete(self, public_id: str) -> None:
        if not public_id:
            return
        try:
            await asyncio.to_thread(cloudinary.uploader.destroy, public_id)
        except (CloudinaryError, OSError) as e:
            logger.error("Error deleting image %s from Cloudinary: %s", public_id, e)
