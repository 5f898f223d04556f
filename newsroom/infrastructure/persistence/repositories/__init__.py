"""Repositories: SQLAlchemy implementations of the application ports."""

from newsroom.infrastructure.persistence.repositories.ad_repo import AdRepository
from newsroom.infrastructure.persistence.repositories.admin_repo import AdminRepository
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.infrastructure.persistence.repositories.category_repo import (
    CategoryRepository,
)
from newsroom.infrastructure.persistence.repositories.nav_menu_repo import (
    NavMenuRepository,
)
from newsroom.infrastructure.persistence.repositories.post_repo import PostRepository
from newsroom.infrastructure.persistence.repositories.post_view_repo import (
    PostViewLedger,
    PostViewRepository,
)
from newsroom.infrastructure.persistence.repositories.subcategory_repo import (
    SubCategoryRepository,
)
from newsroom.infrastructure.persistence.repositories.subscription_repo import (
    SubscriptionRepository,
)
from newsroom.infrastructure.persistence.repositories.tag_repo import TagRepository

__all__ = [
    "AdRepository",
    "AdminRepository",
    "BaseRepository",
    "CategoryRepository",
    "NavMenuRepository",
    "PostRepository",
    "PostViewLedger",
    "PostViewRepository",
    "SubCategoryRepository",
    "SubscriptionRepository",
    "TagRepository",
]
