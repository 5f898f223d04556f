"""Navigation menu repository (single row)."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.infrastructure.persistence.models.nav_menu import NavMenu
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


class NavMenuRepository(BaseRepository[NavMenu]):
    """The menu is the oldest nav_menu row; normally the only one."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, NavMenu)

    async def _get_menu(self) -> NavMenu | None:
        result = await self.db.execute(
            select(NavMenu).order_by(NavMenu.created_at).limit(1)
        )
        return result.scalar_one_or_none()

    async def get_category_ids(self) -> tuple[list[str], datetime | None] | None:
        menu = await self._get_menu()
        if menu is None:
            return None
        return list(menu.category_ids or []), ensure_utc(menu.updated_at)

    async def set_category_ids(self, category_ids: list[str]) -> datetime:
        menu = await self._get_menu()
        if menu is None:
            menu = await self.add(NavMenu(category_ids=list(category_ids)))
        else:
            menu.category_ids = list(category_ids)
            await self.save(menu)
        return ensure_utc(menu.updated_at)

    async def ensure_exists(self) -> bool:
        if await self._get_menu() is not None:
            return False
        await self.add(NavMenu(category_ids=[]))
        return True
