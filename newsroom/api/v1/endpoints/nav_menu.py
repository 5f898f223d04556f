"""Navigation menu: public read, admin replace."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_nav_menu_service,
    get_nav_menu_service_for_write,
)
from newsroom.application.use_cases.content import NavMenuService
from newsroom.core.limiter import limit_writes
from newsroom.schemas.common import Envelope
from newsroom.schemas.content import NavMenuResponse, NavMenuUpdate

router = APIRouter()


@router.get("", response_model=Envelope[NavMenuResponse])
async def get_nav_menu(
    nav_svc: Annotated[NavMenuService, Depends(get_nav_menu_service)],
):
    menu = await nav_svc.get()
    return Envelope[NavMenuResponse](data=NavMenuResponse.model_validate(menu))


@router.put("", response_model=Envelope[NavMenuResponse])
@limit_writes
async def update_nav_menu(
    request: Request,
    body: NavMenuUpdate,
    _admin: CurrentAdmin,
    nav_svc: Annotated[NavMenuService, Depends(get_nav_menu_service_for_write)],
):
    """Replace the menu with up to 10 existing category ids, in order."""
    menu = await nav_svc.update(body.category_ids)
    return Envelope[NavMenuResponse](
        message="Nav menu updated", data=NavMenuResponse.model_validate(menu)
    )
