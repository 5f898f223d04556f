"""Ad repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import AdResult, StoredImage
from newsroom.infrastructure.persistence.models.ad import Ad
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


def _ad_to_result(a: Ad) -> AdResult:
    return AdResult(
        id=a.id,
        title=a.title,
        type=a.type,
        link=a.link,
        image=StoredImage(url=a.image_url, public_id=a.image_public_id),
        is_active=a.is_active,
        created_at=ensure_utc(a.created_at),
        updated_at=ensure_utc(a.updated_at),
    )


class AdRepository(BaseRepository[Ad]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Ad)

    async def list_all(self, ad_type: str | None, is_active: bool | None) -> list[AdResult]:
        stmt = select(Ad).order_by(Ad.created_at.desc())
        if ad_type:
            stmt = stmt.where(Ad.type == ad_type)
        if is_active is not None:
            stmt = stmt.where(Ad.is_active.is_(is_active))
        result = await self.db.execute(stmt)
        return [_ad_to_result(a) for a in result.scalars().all()]

    async def get_by_id(self, ad_id: str) -> AdResult | None:
        ad = await self.get_model(ad_id)
        return _ad_to_result(ad) if ad else None

    async def create(
        self, title: str, ad_type: str, link: str, image: StoredImage, is_active: bool
    ) -> AdResult:
        ad = await self.add(
            Ad(
                title=title,
                type=ad_type,
                link=link,
                image_url=image.url,
                image_public_id=image.public_id,
                is_active=is_active,
            )
        )
        return _ad_to_result(ad)

    async def update(
        self,
        ad_id: str,
        *,
        title: str | None = None,
        ad_type: str | None = None,
        link: str | None = None,
        image: StoredImage | None = None,
        is_active: bool | None = None,
    ) -> AdResult | None:
        ad = await self.get_model(ad_id)
        if ad is None:
            return None
        if title is not None:
            ad.title = title
        if ad_type is not None:
            ad.type = ad_type
        if link is not None:
            ad.link = link
        if image is not None:
            ad.image_url = image.url
            ad.image_public_id = image.public_id
        if is_active is not None:
            ad.is_active = is_active
        await self.save(ad)
        return _ad_to_result(ad)

    async def toggle(self, ad_id: str) -> AdResult | None:
        ad = await self.get_model(ad_id)
        if ad is None:
            return None
        ad.is_active = not ad.is_active
        await self.save(ad)
        return _ad_to_result(ad)

    async def delete(self, ad_id: str) -> bool:
        ad = await self.get_model(ad_id)
        if ad is None:
            return False
        await self.remove(ad)
        return True
