"""Newsletter subscription use cases."""

from __future__ import annotations

from newsroom.application.dtos.content import SubscriptionResult
from newsroom.application.dtos.pagination import Page, PageInfo
from newsroom.application.interfaces.repositories import ISubscriptionRepository
from newsroom.application.use_cases.common import require_object_id
from newsroom.domain.exceptions import ResourceConflictException, ResourceNotFoundException


class SubscriptionService:
    def __init__(self, subscription_repo: ISubscriptionRepository) -> None:
        self.subscription_repo = subscription_repo

    async def subscribe(self, email: str) -> SubscriptionResult:
        email = email.strip().lower()
        if await self.subscription_repo.get_by_email(email) is not None:
            raise ResourceConflictException("This email is already subscribed", field="email")
        return await self.subscription_repo.create(email)

    async def list_page(self, page: PageInfo) -> Page[SubscriptionResult]:
        return await self.subscription_repo.list_page(page)

    async def delete(self, subscription_id: str) -> None:
        require_object_id(subscription_id, "subscription")
        if not await self.subscription_repo.delete(subscription_id):
            raise ResourceNotFoundException("subscription", subscription_id)
