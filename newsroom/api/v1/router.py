"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from newsroom.api.v1.dependencies (no manual repo/service
construction).
"""

from fastapi import APIRouter

from newsroom.api.v1.endpoints import (
    admin_auth,
    ads,
    categories,
    health,
    nav_menu,
    posts,
    subcategories,
    subscriptions,
    tags,
    upload,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(admin_auth.router, prefix="/admin", tags=["admin"])
api_router.include_router(posts.router, prefix="/post", tags=["posts"])
api_router.include_router(categories.router, prefix="/category", tags=["categories"])
api_router.include_router(
    subcategories.router, prefix="/sub-category", tags=["sub-categories"]
)
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(ads.router, prefix="/ads", tags=["ads"])
api_router.include_router(
    subscriptions.router, prefix="/subscriptions", tags=["subscriptions"]
)
api_router.include_router(nav_menu.router, prefix="/nav-menu", tags=["nav-menu"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
