"""SubCategory repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import SubCategoryResult
from newsroom.domain.exceptions import ResourceConflictException
from newsroom.infrastructure.persistence.models.subcategory import SubCategory
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.infrastructure.persistence.repositories.category_repo import (
    subcategory_to_result,
)


def _slug_conflict(slug: str) -> ResourceConflictException:
    return ResourceConflictException(f"Slug '{slug}' already exists", field="slug")


class SubCategoryRepository(BaseRepository[SubCategory]):
    """SubCategory repository. Slug is unique per parent category."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SubCategory)

    async def list_all(
        self, is_active: bool | None = None, category_id: str | None = None
    ) -> list[SubCategoryResult]:
        stmt = select(SubCategory).order_by(SubCategory.created_at.desc())
        if is_active is not None:
            stmt = stmt.where(SubCategory.is_active.is_(is_active))
        if category_id:
            stmt = stmt.where(SubCategory.category_id == category_id)
        result = await self.db.execute(stmt)
        return [subcategory_to_result(s) for s in result.scalars().all()]

    async def get_by_id(self, sub_category_id: str) -> SubCategoryResult | None:
        sub_category = await self.get_model(sub_category_id)
        return subcategory_to_result(sub_category) if sub_category else None

    async def get_by_slug(self, category_id: str, slug: str) -> SubCategoryResult | None:
        result = await self.db.execute(
            select(SubCategory).where(
                SubCategory.category_id == category_id, SubCategory.slug == slug
            )
        )
        sub_category = result.scalar_one_or_none()
        return subcategory_to_result(sub_category) if sub_category else None

    async def create(
        self, name: str, slug: str, category_id: str, is_active: bool
    ) -> SubCategoryResult:
        sub_category = SubCategory(
            name=name, slug=slug, category_id=category_id, is_active=is_active
        )
        try:
            await self.add(sub_category)
        except IntegrityError:
            raise _slug_conflict(slug) from None
        return await self.get_by_id(sub_category.id)

    async def update(
        self,
        sub_category_id: str,
        *,
        name: str | None = None,
        slug: str | None = None,
        category_id: str | None = None,
        is_active: bool | None = None,
    ) -> SubCategoryResult | None:
        sub_category = await self.get_model(sub_category_id)
        if sub_category is None:
            return None
        if name is not None:
            sub_category.name = name
        if slug is not None:
            sub_category.slug = slug
        if category_id is not None:
            sub_category.category_id = category_id
        if is_active is not None:
            sub_category.is_active = is_active
        try:
            await self.save(sub_category)
        except IntegrityError:
            raise _slug_conflict(sub_category.slug) from None
        return await self.get_by_id(sub_category_id)

    async def toggle(self, sub_category_id: str) -> SubCategoryResult | None:
        sub_category = await self.get_model(sub_category_id)
        if sub_category is None:
            return None
        sub_category.is_active = not sub_category.is_active
        await self.save(sub_category)
        return await self.get_by_id(sub_category_id)

    async def delete(self, sub_category_id: str) -> bool:
        sub_category = await self.get_model(sub_category_id)
        if sub_category is None:
            return False
        await self.remove(sub_category)
        return True
