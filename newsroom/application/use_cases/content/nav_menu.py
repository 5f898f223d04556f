"""Navigation menu use cases (single ordered list of categories)."""

from __future__ import annotations

from newsroom.application.dtos.content import NavMenuResult
from newsroom.application.interfaces.repositories import (
    ICategoryRepository,
    INavMenuRepository,
)
from newsroom.application.use_cases.common import require_object_id
from newsroom.core.constants import NAV_MENU_MAX_CATEGORIES
from newsroom.domain.exceptions import ResourceNotFoundException, ValidationException


class NavMenuService:
    def __init__(
        self, nav_menu_repo: INavMenuRepository, category_repo: ICategoryRepository
    ) -> None:
        self.nav_menu_repo = nav_menu_repo
        self.category_repo = category_repo

    async def get(self) -> NavMenuResult:
        """Menu categories in stored order; ids of deleted categories are skipped."""
        stored = await self.nav_menu_repo.get_category_ids()
        if stored is None:
            return NavMenuResult(categories=[])
        category_ids, updated_at = stored
        refs = await self.category_repo.get_refs(category_ids)
        return NavMenuResult(
            categories=[refs[cid] for cid in category_ids if cid in refs],
            updated_at=updated_at,
        )

    async def update(self, category_ids: list[str]) -> NavMenuResult:
        ids = list(dict.fromkeys(category_ids))
        if len(ids) > NAV_MENU_MAX_CATEGORIES:
            raise ValidationException(
                f"Provide an array of max {NAV_MENU_MAX_CATEGORIES} IDs.",
                field="category_ids",
            )
        for category_id in ids:
            require_object_id(category_id, "category")
        refs = await self.category_repo.get_refs(ids)
        missing = [cid for cid in ids if cid not in refs]
        if missing:
            raise ResourceNotFoundException("category", missing[0])
        updated_at = await self.nav_menu_repo.set_category_ids(ids)
        return NavMenuResult(categories=[refs[cid] for cid in ids], updated_at=updated_at)
