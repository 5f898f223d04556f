"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, authentication and application
services. Routes depend only on these providers, not on infrastructure.
"""

from newsroom.api.v1.dependencies.auth import CurrentAdmin, get_current_admin
from newsroom.api.v1.dependencies.db import (
    ReadSession,
    WriteSession,
    get_admin_repo,
    get_trending_queries,
)
from newsroom.api.v1.dependencies.services import (
    get_ad_service,
    get_ad_service_for_write,
    get_admin_auth_service,
    get_category_service,
    get_category_service_for_write,
    get_email_sender,
    get_image_store,
    get_image_upload_service,
    get_nav_menu_service,
    get_nav_menu_service_for_write,
    get_password_reset_service,
    get_post_service,
    get_post_service_for_write,
    get_reset_policy,
    get_sub_category_service,
    get_sub_category_service_for_write,
    get_subscription_service,
    get_subscription_service_for_write,
    get_tag_service,
    get_trending_service,
    get_view_tracking_service,
)
from newsroom.api.v1.dependencies.uploads import spooled_upload
from newsroom.api.v1.dependencies.views import track_post_view

__all__ = [
    "CurrentAdmin",
    "ReadSession",
    "WriteSession",
    "get_ad_service",
    "get_ad_service_for_write",
    "get_admin_auth_service",
    "get_admin_repo",
    "get_category_service",
    "get_category_service_for_write",
    "get_current_admin",
    "get_email_sender",
    "get_image_store",
    "get_image_upload_service",
    "get_nav_menu_service",
    "get_nav_menu_service_for_write",
    "get_password_reset_service",
    "get_post_service",
    "get_post_service_for_write",
    "get_reset_policy",
    "get_sub_category_service",
    "get_sub_category_service_for_write",
    "get_subscription_service",
    "get_subscription_service_for_write",
    "get_tag_service",
    "get_trending_queries",
    "get_trending_service",
    "get_view_tracking_service",
    "spooled_upload",
    "track_post_view",
]
