"""Subscription repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import SubscriptionResult
from newsroom.application.dtos.pagination import Page, PageInfo
from newsroom.domain.exceptions import ResourceConflictException
from newsroom.infrastructure.persistence.models.subscription import Subscription
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


def _to_result(s: Subscription) -> SubscriptionResult:
    return SubscriptionResult(id=s.id, email=s.email, created_at=ensure_utc(s.created_at))


class SubscriptionRepository(BaseRepository[Subscription]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Subscription)

    async def get_by_email(self, email: str) -> SubscriptionResult | None:
        result = await self.db.execute(
            select(Subscription).where(Subscription.email == email)
        )
        subscription = result.scalar_one_or_none()
        return _to_result(subscription) if subscription else None

    async def create(self, email: str) -> SubscriptionResult:
        try:
            subscription = await self.add(Subscription(email=email))
        except IntegrityError:
            raise ResourceConflictException(
                "This email is already subscribed", field="email"
            ) from None
        return _to_result(subscription)

    async def list_page(self, page: PageInfo) -> Page[SubscriptionResult]:
        total = await self.count_where()
        result = await self.db.execute(
            select(Subscription)
            .order_by(Subscription.created_at.desc())
            .offset(page.skip)
            .limit(page.limit)
        )
        return Page(
            items=[_to_result(s) for s in result.scalars().all()],
            info=PageInfo(total=total, page=page.page, limit=page.limit),
        )

    async def delete(self, subscription_id: str) -> bool:
        subscription = await self.get_model(subscription_id)
        if subscription is None:
            return False
        await self.remove(subscription)
        return True
