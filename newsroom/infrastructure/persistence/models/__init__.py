"""Persistence models: ORM entities and mixins."""

from newsroom.infrastructure.persistence.models.ad import Ad
from newsroom.infrastructure.persistence.models.admin import Admin
from newsroom.infrastructure.persistence.models.category import Category
from newsroom.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ObjectIdMixin,
    TimestampMixin,
    VersionedMixin,
)
from newsroom.infrastructure.persistence.models.nav_menu import NavMenu
from newsroom.infrastructure.persistence.models.post import Post
from newsroom.infrastructure.persistence.models.post_view import PostView
from newsroom.infrastructure.persistence.models.subcategory import SubCategory
from newsroom.infrastructure.persistence.models.subscription import Subscription
from newsroom.infrastructure.persistence.models.tag import Tag, post_tag

__all__ = [
    "Ad",
    "Admin",
    "Category",
    "SubCategory",
    "Post",
    "PostView",
    "Tag",
    "post_tag",
    "Subscription",
    "NavMenu",
    "CuidMixin",
    "ObjectIdMixin",
    "TimestampMixin",
    "VersionedMixin",
]
