"""Image store factory: creates the local or Cloudinary backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from newsroom.application.interfaces.services import IImageStore
from newsroom.infrastructure.exceptions import ImageStoreConfigurationError

if TYPE_CHECKING:
    from newsroom.core.config import Settings


class ImageStoreFactory:
    """Factory for image store instances based on configuration."""

    @staticmethod
    def create_image_store(settings: "Settings | None" = None) -> IImageStore:
        """Create the image store from settings.

        Raises:
            ImageStoreConfigurationError: Unknown backend or missing credentials.
        """
        from newsroom.core.config import get_settings

        s = settings or get_settings()
        backend = s.image_store_backend.lower()

        if backend == "local":
            from newsroom.infrastructure.external.storage.local_store import (
                LocalImageStore,
            )

            return LocalImageStore(root=s.image_store_root, base_url=s.image_store_base_url)
        if backend == "cloudinary":
            from newsroom.infrastructure.external.storage.cloudinary_store import (
                CloudinaryImageStore,
            )

            if not (s.cloudinary_cloud_name and s.cloudinary_api_key and s.cloudinary_api_secret):
                raise ImageStoreConfigurationError(
                    "CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET are required"
                )
            return CloudinaryImageStore(
                cloud_name=s.cloudinary_cloud_name,
                api_key=s.cloudinary_api_key,
                api_secret=s.cloudinary_api_secret.get_secret_value(),
            )
        raise ImageStoreConfigurationError(
            f"Unknown image store backend: {backend}. Supported: 'local', 'cloudinary'"
        )
