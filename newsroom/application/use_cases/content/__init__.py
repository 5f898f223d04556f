"""Content use cases."""

from newsroom.application.use_cases.content.ads import AdService
from newsroom.application.use_cases.content.categories import CategoryService
from newsroom.application.use_cases.content.images import ImageUploadService
from newsroom.application.use_cases.content.nav_menu import NavMenuService
from newsroom.application.use_cases.content.posts import PostService
from newsroom.application.use_cases.content.subcategories import SubCategoryService
from newsroom.application.use_cases.content.subscriptions import SubscriptionService
from newsroom.application.use_cases.content.tags import TagService, parse_tag_names

__all__ = [
    "AdService",
    "CategoryService",
    "ImageUploadService",
    "NavMenuService",
    "PostService",
    "SubCategoryService",
    "SubscriptionService",
    "TagService",
    "parse_tag_names",
]
