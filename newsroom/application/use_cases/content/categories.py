"""Category use cases."""

from __future__ import annotations

from newsroom.application.dtos.content import CategoryResult
from newsroom.application.interfaces.repositories import ICategoryRepository
from newsroom.application.use_cases.common import require_object_id
from newsroom.domain.exceptions import (
    ResourceConflictException,
    ResourceInUseException,
    ResourceNotFoundException,
    ValidationException,
)
from newsroom.shared.utils.slugs import make_slug


class CategoryService:
    def __init__(self, category_repo: ICategoryRepository) -> None:
        self.category_repo = category_repo

    async def list_active(self) -> list[CategoryResult]:
        return await self.category_repo.list_active()

    async def get(self, category_id: str) -> CategoryResult:
        require_object_id(category_id, "category")
        category = await self.category_repo.get_by_id(category_id)
        if category is None:
            raise ResourceNotFoundException("category", category_id)
        return category

    async def get_by_slug(self, slug: str) -> CategoryResult:
        category = await self.category_repo.get_by_slug(slug)
        if category is None:
            raise ResourceNotFoundException("category", slug)
        return category

    async def _ensure_name_free(self, name: str, category_id: str | None = None) -> None:
        existing = await self.category_repo.get_by_exact_name(name)
        if existing is not None and existing.id != category_id:
            raise ResourceConflictException(f"Name '{name}' already exists", field="name")

    async def create(self, name: str, description: str | None = None) -> CategoryResult:
        name = name.strip()
        slug = make_slug(name)
        if not slug:
            raise ValidationException("Name must contain letters or digits", field="name")
        await self._ensure_name_free(name)
        return await self.category_repo.create(name, slug, description)

    async def update(
        self,
        category_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> CategoryResult:
        await self.get(category_id)
        slug = None
        if name is not None:
            name = name.strip()
            slug = make_slug(name)
            if not slug:
                raise ValidationException("Name must contain letters or digits", field="name")
            await self._ensure_name_free(name, category_id)
        updated = await self.category_repo.update(
            category_id,
            name=name,
            slug=slug,
            description=description,
            is_active=is_active,
        )
        if updated is None:
            raise ResourceNotFoundException("category", category_id)
        return updated

    async def toggle(self, category_id: str) -> CategoryResult:
        require_object_id(category_id, "category")
        toggled = await self.category_repo.toggle(category_id)
        if toggled is None:
            raise ResourceNotFoundException("category", category_id)
        return toggled

    async def delete(self, category_id: str) -> None:
        """Delete an unreferenced category. Raises ResourceInUseException otherwise."""
        await self.get(category_id)
        if await self.category_repo.count_subcategories(category_id):
            raise ResourceInUseException(
                "Cannot delete category with existing subcategories"
            )
        if await self.category_repo.count_posts(category_id):
            raise ResourceInUseException("Cannot delete category with existing posts")
        await self.category_repo.delete(category_id)
