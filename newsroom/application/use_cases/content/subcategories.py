"""SubCategory use cases."""

from __future__ import annotations

from newsroom.application.dtos.content import SubCategoryResult
from newsroom.application.interfaces.repositories import (
    ICategoryRepository,
    ISubCategoryRepository,
)
from newsroom.application.use_cases.common import require_object_id
from newsroom.domain.exceptions import ResourceNotFoundException, ValidationException
from newsroom.shared.utils.slugs import make_slug


class SubCategoryService:
    def __init__(
        self,
        sub_category_repo: ISubCategoryRepository,
        category_repo: ICategoryRepository,
    ) -> None:
        self.sub_category_repo = sub_category_repo
        self.category_repo = category_repo

    async def _require_category(self, category_id: str) -> None:
        require_object_id(category_id, "category")
        if await self.category_repo.get_by_id(category_id) is None:
            raise ResourceNotFoundException("category", category_id)

    async def list_all(
        self, is_active: bool | None = None, category_id: str | None = None
    ) -> list[SubCategoryResult]:
        if category_id:
            require_object_id(category_id, "category")
        return await self.sub_category_repo.list_all(is_active, category_id)

    async def get(self, sub_category_id: str) -> SubCategoryResult:
        require_object_id(sub_category_id, "subcategory")
        sub_category = await self.sub_category_repo.get_by_id(sub_category_id)
        if sub_category is None:
            raise ResourceNotFoundException("subcategory", sub_category_id)
        return sub_category

    async def get_by_slug(self, category_id: str, slug: str) -> SubCategoryResult:
        require_object_id(category_id, "category")
        sub_category = await self.sub_category_repo.get_by_slug(category_id, slug)
        if sub_category is None:
            raise ResourceNotFoundException("subcategory", slug)
        return sub_category

    async def create(
        self, name: str, category_id: str, is_active: bool = True
    ) -> SubCategoryResult:
        await self._require_category(category_id)
        name = name.strip()
        slug = make_slug(name)
        if not slug:
            raise ValidationException("Name must contain letters or digits", field="name")
        return await self.sub_category_repo.create(name, slug, category_id, is_active)

    async def update(
        self,
        sub_category_id: str,
        *,
        name: str | None = None,
        category_id: str | None = None,
        is_active: bool | None = None,
    ) -> SubCategoryResult:
        await self.get(sub_category_id)
        if category_id is not None:
            await self._require_category(category_id)
        slug = None
        if name is not None:
            name = name.strip()
            slug = make_slug(name)
            if not slug:
                raise ValidationException("Name must contain letters or digits", field="name")
        updated = await self.sub_category_repo.update(
            sub_category_id,
            name=name,
            slug=slug,
            category_id=category_id,
            is_active=is_active,
        )
        if updated is None:
            raise ResourceNotFoundException("subcategory", sub_category_id)
        return updated

    async def toggle(self, sub_category_id: str) -> SubCategoryResult:
        require_object_id(sub_category_id, "subcategory")
        toggled = await self.sub_category_repo.toggle(sub_category_id)
        if toggled is None:
            raise ResourceNotFoundException("subcategory", sub_category_id)
        return toggled

    async def delete(self, sub_category_id: str) -> None:
        require_object_id(sub_category_id, "subcategory")
        if not await self.sub_category_repo.delete(sub_category_id):
            raise ResourceNotFoundException("subcategory", sub_category_id)
