"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from newsroom.application.dtos.admin import AdminResult
    from newsroom.application.dtos.content import (
        AdResult,
        CategoryRef,
        CategoryResult,
        PostCreate,
        PostResult,
        PostUpdate,
        StoredImage,
        SubCategoryResult,
        SubscriptionResult,
        TagRef,
        TagResult,
    )
    from newsroom.application.dtos.pagination import Page, PageInfo
    from newsroom.application.dtos.trending import TrendingPostItem
    from newsroom.domain.entities.admin import AdminEntity
    from newsroom.domain.value_objects.reset_session import ResetSession


class IAdminRepository(Protocol):
    """Protocol for the admin credential store (DIP)."""

    async def get_by_email(self, email: str) -> AdminEntity | None:
        """Return the admin (with reset state and version) for a normalized email."""

    async def save_reset_state(
        self, admin_id: str, expected_version: int, state: ResetSession
    ) -> int:
        """Compare-and-swap the reset state, commit, and return the new version.

        Raises ResetSessionConflictException when expected_version is stale.
        """

    async def change_password(
        self,
        admin_id: str,
        expected_version: int,
        hashed_password: str,
        state: ResetSession,
    ) -> int:
        """Compare-and-swap the credential together with the closed reset state."""

    async def create_admin(
        self, username: str, email: str, hashed_password: str
    ) -> AdminResult:
        """Provision an admin (seed script). Raises ResourceConflictException on duplicate email."""


class IPostViewLedger(Protocol):
    """Protocol for the view ledger used by view tracking (DIP)."""

    async def should_count(self, post_id: str, viewer_ip: str, since: datetime) -> bool:
        """True when the post exists and the viewer has no ledger row since ``since``."""

    async def record_view(self, post_id: str, viewer_ip: str) -> None:
        """Insert one ledger row."""

    async def increment_views(self, post_id: str) -> None:
        """Atomically add one to the post popularity counter."""


class ITrendingQueries(Protocol):
    """Protocol for the aggregations behind the trending ranking (DIP)."""

    async def most_viewed_since(
        self, since: datetime, exclude_ids: list[str], limit: int
    ) -> list[TrendingPostItem]:
        """Non-draft posts by ledger count since ``since``, count desc then newest."""

    async def latest_posts(
        self, exclude_ids: list[str], limit: int
    ) -> list[TrendingPostItem]:
        """Newest non-draft posts not in ``exclude_ids`` with view_count 0."""

    async def purge_older_than(self, cutoff: datetime) -> int:
        """Delete ledger rows created before ``cutoff``; return the row count."""


class ICategoryRepository(Protocol):
    """Protocol for category repository (DIP)."""

    async def list_active(self) -> list[CategoryResult]: ...

    async def get_by_id(self, category_id: str) -> CategoryResult | None: ...

    async def get_by_slug(self, slug: str) -> CategoryResult | None: ...

    async def find_by_name(self, name: str) -> CategoryResult | None:
        """Case-insensitive substring match on name (first, newest wins)."""

    async def get_by_exact_name(self, name: str) -> CategoryResult | None:
        """Case-insensitive exact match on name."""

    async def get_refs(self, category_ids: list[str]) -> dict[str, CategoryRef]: ...

    async def create(self, name: str, slug: str, description: str | None) -> CategoryResult: ...

    async def update(
        self,
        category_id: str,
        *,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> CategoryResult | None: ...

    async def toggle(self, category_id: str) -> CategoryResult | None: ...

    async def count_subcategories(self, category_id: str) -> int: ...

    async def count_posts(self, category_id: str) -> int: ...

    async def delete(self, category_id: str) -> bool: ...


class ISubCategoryRepository(Protocol):
    """Protocol for subcategory repository (DIP)."""

    async def list_all(
        self, is_active: bool | None = None, category_id: str | None = None
    ) -> list[SubCategoryResult]: ...

    async def get_by_id(self, sub_category_id: str) -> SubCategoryResult | None: ...

    async def get_by_slug(self, category_id: str, slug: str) -> SubCategoryResult | None: ...

    async def create(
        self, name: str, slug: str, category_id: str, is_active: bool
    ) -> SubCategoryResult: ...

    async def update(
        self,
        sub_category_id: str,
        *,
        name: str | None = None,
        slug: str | None = None,
        category_id: str | None = None,
        is_active: bool | None = None,
    ) -> SubCategoryResult | None: ...

    async def toggle(self, sub_category_id: str) -> SubCategoryResult | None: ...

    async def delete(self, sub_category_id: str) -> bool: ...


class ITagRepository(Protocol):
    """Protocol for tag repository (DIP)."""

    async def upsert_many(self, names: list[str]) -> list[TagRef]:
        """Create missing tags and return refs for all ``names``."""

    async def list_with_counts(self) -> list[TagResult]: ...

    async def search(self, name: str) -> list[TagResult]: ...

    async def popular(self, limit: int) -> list[TagResult]: ...

    async def get_by_id(self, tag_id: str) -> TagResult | None: ...

    async def get_by_name(self, name: str) -> TagResult | None: ...


class IPostRepository(Protocol):
    """Protocol for post repository (DIP)."""

    async def get_by_id(self, post_id: str) -> PostResult | None: ...

    async def list_feed(self, is_draft: bool) -> list[PostResult]: ...

    async def search(
        self, query: str | None, category_id: str | None, page: PageInfo
    ) -> Page[PostResult]: ...

    async def list_filtered(
        self, category_id: str | None, tag_id: str | None, page: PageInfo
    ) -> Page[PostResult]: ...

    async def list_by_tag(self, tag_id: str, page: PageInfo) -> Page[PostResult]: ...

    async def create(
        self, data: PostCreate, slug: str, image: StoredImage, tag_ids: list[str]
    ) -> PostResult: ...

    async def update(
        self,
        post_id: str,
        data: PostUpdate,
        slug: str | None,
        image: StoredImage | None,
        tag_ids: list[str] | None,
    ) -> PostResult | None: ...

    async def delete(self, post_id: str) -> bool: ...


class IAdRepository(Protocol):
    """Protocol for ad repository (DIP)."""

    async def list_all(self, ad_type: str | None, is_active: bool | None) -> list[AdResult]: ...

    async def get_by_id(self, ad_id: str) -> AdResult | None: ...

    async def create(
        self, title: str, ad_type: str, link: str, image: StoredImage, is_active: bool
    ) -> AdResult: ...

    async def update(
        self,
        ad_id: str,
        *,
        title: str | None = None,
        ad_type: str | None = None,
        link: str | None = None,
        image: StoredImage | None = None,
        is_active: bool | None = None,
    ) -> AdResult | None: ...

    async def toggle(self, ad_id: str) -> AdResult | None: ...

    async def delete(self, ad_id: str) -> bool: ...


class ISubscriptionRepository(Protocol):
    """Protocol for subscription repository (DIP)."""

    async def get_by_email(self, email: str) -> SubscriptionResult | None: ...

    async def create(self, email: str) -> SubscriptionResult: ...

    async def list_page(self, page: PageInfo) -> Page[SubscriptionResult]: ...

    async def delete(self, subscription_id: str) -> bool: ...


class INavMenuRepository(Protocol):
    """Protocol for the single-row navigation menu (DIP)."""

    async def get_category_ids(self) -> tuple[list[str], datetime | None] | None:
        """Return (ordered ids, updated_at) or None when no menu row exists."""

    async def set_category_ids(self, category_ids: list[str]) -> datetime:
        """Upsert the menu row; return its updated_at."""

    async def ensure_exists(self) -> bool:
        """Create an empty menu when missing; True when a row was created."""
