"""Image handling shared by post, ad and upload use cases."""

from __future__ import annotations

from newsroom.application.dtos.content import StoredImage
from newsroom.application.interfaces.services import IImageStore
from newsroom.core.constants import POST_IMAGE_FOLDER


class ImageUploadService:
    """Standalone image upload (e.g. images embedded in post content)."""

    def __init__(self, image_store: IImageStore) -> None:
        self.image_store = image_store

    async def upload(self, path: str, folder: str = POST_IMAGE_FOLDER) -> StoredImage:
        return await self.image_store.upload(path, folder)
