"""Newsletter subscriptions: public sign-up, admin listing and removal."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_subscription_service,
    get_subscription_service_for_write,
)
from newsroom.application.use_cases.common import page_request
from newsroom.application.use_cases.content import SubscriptionService
from newsroom.core.constants import SUBSCRIPTION_PAGE_SIZE
from newsroom.core.limiter import limit_subscribe, limit_writes
from newsroom.schemas.common import Envelope, MessageResponse, PageEnvelope, Pagination
from newsroom.schemas.content import SubscriptionCreate, SubscriptionResponse

router = APIRouter()


@router.post("", response_model=Envelope[SubscriptionResponse], status_code=201)
@limit_subscribe
async def subscribe(
    request: Request,
    body: SubscriptionCreate,
    subscription_svc: Annotated[
        SubscriptionService, Depends(get_subscription_service_for_write)
    ],
):
    subscription = await subscription_svc.subscribe(str(body.email))
    return Envelope[SubscriptionResponse](
        message="Subscribed successfully",
        data=SubscriptionResponse.model_validate(subscription),
    )


@router.get("", response_model=PageEnvelope[SubscriptionResponse])
async def list_subscriptions(
    _admin: CurrentAdmin,
    subscription_svc: Annotated[SubscriptionService, Depends(get_subscription_service)],
    page: int = Query(1, ge=1),
    limit: int = Query(SUBSCRIPTION_PAGE_SIZE, ge=1),
):
    result = await subscription_svc.list_page(page_request(page, limit))
    return PageEnvelope[SubscriptionResponse](
        data=[SubscriptionResponse.model_validate(s) for s in result.items],
        pagination=Pagination.from_info(result.info),
    )


@router.delete("/{subscription_id}", response_model=MessageResponse)
@limit_writes
async def unsubscribe(
    request: Request,
    subscription_id: str,
    _admin: CurrentAdmin,
    subscription_svc: Annotated[
        SubscriptionService, Depends(get_subscription_service_for_write)
    ],
):
    await subscription_svc.delete(subscription_id)
    return MessageResponse(message="Subscription deleted successfully")
