"""Ad use cases (image-backed, same compensation as posts)."""

from __future__ import annotations

from newsroom.application.dtos.content import AdResult
from newsroom.application.interfaces.repositories import IAdRepository
from newsroom.application.interfaces.services import IImageStore
from newsroom.application.use_cases.common import require_object_id
from newsroom.core.constants import AD_IMAGE_FOLDER
from newsroom.domain.enums import AdType
from newsroom.domain.exceptions import ResourceNotFoundException, ValidationException
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _validate_type(ad_type: str) -> str:
    if ad_type not in AdType.values():
        raise ValidationException(
            "Invalid type. Must be 'horizontal' or 'square'", field="type"
        )
    return ad_type


class AdService:
    def __init__(self, ad_repo: IAdRepository, image_store: IImageStore) -> None:
        self.ad_repo = ad_repo
        self.image_store = image_store

    async def list_all(
        self, ad_type: str | None = None, is_active: bool | None = None
    ) -> list[AdResult]:
        if ad_type:
            _validate_type(ad_type)
        return await self.ad_repo.list_all(ad_type, is_active)

    async def get(self, ad_id: str) -> AdResult:
        require_object_id(ad_id, "ad")
        ad = await self.ad_repo.get_by_id(ad_id)
        if ad is None:
            raise ResourceNotFoundException("ad", ad_id)
        return ad

    async def create(
        self,
        title: str,
        ad_type: str,
        link: str,
        image_path: str,
        is_active: bool = True,
    ) -> AdResult:
        if not title.strip() or not link.strip():
            raise ValidationException("Title, type, and link are required")
        _validate_type(ad_type)
        image = await self.image_store.upload(image_path, AD_IMAGE_FOLDER)
        try:
            return await self.ad_repo.create(
                title.strip(), ad_type, link.strip(), image, is_active
            )
        except Exception:
            logger.warning("Ad create failed; removing uploaded image %s", image.public_id)
            await self.image_store.delete(image.public_id)
            raise

    async def update(
        self,
        ad_id: str,
        *,
        title: str | None = None,
        ad_type: str | None = None,
        link: str | None = None,
        is_active: bool | None = None,
        image_path: str | None = None,
    ) -> AdResult:
        existing = await self.get(ad_id)
        if ad_type is not None:
            _validate_type(ad_type)
        image = None
        if image_path is not None:
            image = await self.image_store.upload(image_path, AD_IMAGE_FOLDER)
        try:
            updated = await self.ad_repo.update(
                ad_id,
                title=title.strip() if title is not None else None,
                ad_type=ad_type,
                link=link.strip() if link is not None else None,
                image=image,
                is_active=is_active,
            )
        except Exception:
            if image is not None:
                await self.image_store.delete(image.public_id)
            raise
        if updated is None:
            if image is not None:
                await self.image_store.delete(image.public_id)
            raise ResourceNotFoundException("ad", ad_id)
        if image is not None and existing.image.public_id:
            await self.image_store.delete(existing.image.public_id)
        return updated

    async def toggle(self, ad_id: str) -> AdResult:
        require_object_id(ad_id, "ad")
        toggled = await self.ad_repo.toggle(ad_id)
        if toggled is None:
            raise ResourceNotFoundException("ad", ad_id)
        return toggled

    async def delete(self, ad_id: str) -> None:
        ad = await self.get(ad_id)
        await self.ad_repo.delete(ad_id)
        if ad.image.public_id:
            await self.image_store.delete(ad.image.public_id)
