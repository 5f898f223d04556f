"""Category repository. Interface methods return application DTOs."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.content import (
    CategoryRef,
    CategoryResult,
    SubCategoryResult,
)
from newsroom.domain.exceptions import ResourceConflictException
from newsroom.infrastructure.persistence.models.category import Category
from newsroom.infrastructure.persistence.models.post import Post
from newsroom.infrastructure.persistence.models.subcategory import SubCategory
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc


def subcategory_to_result(s: SubCategory, with_category: bool = True) -> SubCategoryResult:
    """Map ORM SubCategory to SubCategoryResult."""
    category = None
    if with_category and s.category is not None:
        category = CategoryRef(id=s.category.id, name=s.category.name, slug=s.category.slug)
    return SubCategoryResult(
        id=s.id,
        name=s.name,
        slug=s.slug,
        category_id=s.category_id,
        is_active=s.is_active,
        created_at=ensure_utc(s.created_at),
        updated_at=ensure_utc(s.updated_at),
        category=category,
    )


def _category_to_result(c: Category) -> CategoryResult:
    return CategoryResult(
        id=c.id,
        name=c.name,
        slug=c.slug,
        description=c.description,
        is_active=c.is_active,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
        subcategories=[
            subcategory_to_result(s, with_category=False) for s in c.subcategories
        ],
    )


class CategoryRepository(BaseRepository[Category]):
    """Category repository; subcategories are eagerly loaded with each row."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Category)

    async def list_active(self) -> list[CategoryResult]:
        result = await self.db.execute(
            select(Category)
            .where(Category.is_active.is_(True))
            .order_by(Category.created_at.desc())
        )
        return [_category_to_result(c) for c in result.scalars().all()]

    async def get_by_id(self, category_id: str) -> CategoryResult | None:
        category = await self.get_model(category_id)
        return _category_to_result(category) if category else None

    async def get_by_slug(self, slug: str) -> CategoryResult | None:
        result = await self.db.execute(select(Category).where(Category.slug == slug))
        category = result.scalar_one_or_none()
        return _category_to_result(category) if category else None

    async def find_by_name(self, name: str) -> CategoryResult | None:
        result = await self.db.execute(
            select(Category)
            .where(func.lower(Category.name).contains(name.lower(), autoescape=True))
            .order_by(Category.created_at.desc())
            .limit(1)
        )
        category = result.scalar_one_or_none()
        return _category_to_result(category) if category else None

    async def get_by_exact_name(self, name: str) -> CategoryResult | None:
        result = await self.db.execute(
            select(Category).where(func.lower(Category.name) == name.strip().lower())
        )
        category = result.scalar_one_or_none()
        return _category_to_result(category) if category else None

    async def get_refs(self, category_ids: list[str]) -> dict[str, CategoryRef]:
        if not category_ids:
            return {}
        result = await self.db.execute(
            select(Category.id, Category.name, Category.slug).where(
                Category.id.in_(category_ids)
            )
        )
        return {
            row.id: CategoryRef(id=row.id, name=row.name, slug=row.slug)
            for row in result.all()
        }

    async def create(
        self, name: str, slug: str, description: str | None
    ) -> CategoryResult:
        category = Category(name=name, slug=slug, description=description)
        try:
            await self.add(category)
        except IntegrityError:
            raise ResourceConflictException(
                f"Name '{name}' already exists", field="name"
            ) from None
        return await self.get_by_id(category.id)

    async def update(
        self,
        category_id: str,
        *,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> CategoryResult | None:
        category = await self.get_model(category_id)
        if category is None:
            return None
        if name is not None:
            category.name = name
        if slug is not None:
            category.slug = slug
        if description is not None:
            category.description = description
        if is_active is not None:
            category.is_active = is_active
        try:
            await self.save(category)
        except IntegrityError:
            raise ResourceConflictException(
                f"Name '{name}' already exists", field="name"
            ) from None
        return await self.get_by_id(category_id)

    async def toggle(self, category_id: str) -> CategoryResult | None:
        category = await self.get_model(category_id)
        if category is None:
            return None
        category.is_active = not category.is_active
        await self.save(category)
        return await self.get_by_id(category_id)

    async def count_subcategories(self, category_id: str) -> int:
        return await self.count_where(
            SubCategory.category_id == category_id, model=SubCategory
        )

    async def count_posts(self, category_id: str) -> int:
        return await self.count_where(Post.category_id == category_id, model=Post)

    async def delete(self, category_id: str) -> bool:
        category = await self.get_model(category_id)
        if category is None:
            return False
        await self.remove(category)
        return True
