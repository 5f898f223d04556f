"""Application service and use case dependencies (composition root).

Collaborators (image store, mail sender, hashers) are built from settings
here; routes depend only on these providers.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated

from fastapi import Depends

from newsroom.application.interfaces.services import IEmailSender, IImageStore
from newsroom.application.services import (
    AdminAuthService,
    PasswordResetService,
    TrendingService,
    ViewTrackingService,
)
from newsroom.application.use_cases.content import (
    AdService,
    CategoryService,
    ImageUploadService,
    NavMenuService,
    PostService,
    SubCategoryService,
    SubscriptionService,
    TagService,
)
from newsroom.api.v1.dependencies.db import (
    ReadSession,
    WriteSession,
    get_admin_repo,
    get_trending_queries,
)
from newsroom.core.config import get_settings
from newsroom.domain.value_objects.reset_session import ResetPolicy
from newsroom.infrastructure.external.email import (
    EmailSenderFactory,
    EmailTemplateRenderer,
)
from newsroom.infrastructure.external.storage import ImageStoreFactory
from newsroom.infrastructure.persistence.database import get_session_factory
from newsroom.infrastructure.persistence.repositories import (
    AdRepository,
    AdminRepository,
    CategoryRepository,
    NavMenuRepository,
    PostRepository,
    PostViewLedger,
    PostViewRepository,
    SubCategoryRepository,
    SubscriptionRepository,
    TagRepository,
)
from newsroom.infrastructure.security import (
    BcryptPasswordHasher,
    HmacOtpHasher,
    JwtTokenService,
)

# ---- external collaborators ----------------------------------------------


def get_image_store() -> IImageStore:
    """Image store selected by IMAGE_STORE_BACKEND."""
    return ImageStoreFactory.create_image_store()


def get_email_sender() -> IEmailSender:
    """Mail sender selected by MAIL_BACKEND."""
    return EmailSenderFactory.create_sender()


def get_reset_policy() -> ResetPolicy:
    s = get_settings()
    return ResetPolicy(
        otp_ttl=timedelta(seconds=s.otp_ttl_seconds),
        session_ttl=timedelta(seconds=s.reset_session_ttl_seconds),
        request_cooldown=timedelta(seconds=s.otp_request_cooldown_seconds),
        max_attempts=s.otp_max_attempts,
        lockout=timedelta(seconds=s.otp_lockout_seconds),
    )


ImageStore = Annotated[IImageStore, Depends(get_image_store)]

# ---- admin auth and password reset ---------------------------------------


async def get_admin_auth_service(
    admin_repo: Annotated[AdminRepository, Depends(get_admin_repo)],
) -> AdminAuthService:
    return AdminAuthService(admin_repo, BcryptPasswordHasher(), JwtTokenService())


async def get_password_reset_service(
    admin_repo: Annotated[AdminRepository, Depends(get_admin_repo)],
    email_sender: Annotated[IEmailSender, Depends(get_email_sender)],
    policy: Annotated[ResetPolicy, Depends(get_reset_policy)],
) -> PasswordResetService:
    return PasswordResetService(
        admin_repo,
        HmacOtpHasher(),
        BcryptPasswordHasher(),
        email_sender,
        EmailTemplateRenderer(),
        policy=policy,
        app_name=get_settings().app_name,
    )


# ---- view ledger and trending --------------------------------------------


def get_view_tracking_service() -> ViewTrackingService:
    """Ledger operations open their own sessions so they can run concurrently."""
    return ViewTrackingService(
        PostViewLedger(get_session_factory()),
        dedup_window=timedelta(hours=get_settings().view_dedup_window_hours),
    )


async def get_trending_service(
    queries: Annotated[PostViewRepository, Depends(get_trending_queries)],
) -> TrendingService:
    s = get_settings()
    return TrendingService(
        queries,
        limit=s.trending_limit,
        recent_window=timedelta(hours=s.trending_recent_window_hours),
        extended_window=timedelta(days=s.trending_extended_window_days),
    )


# ---- content ---------------------------------------------------------------


async def get_category_service(db: ReadSession) -> CategoryService:
    return CategoryService(CategoryRepository(db))


async def get_category_service_for_write(db: WriteSession) -> CategoryService:
    return CategoryService(CategoryRepository(db))


async def get_sub_category_service(db: ReadSession) -> SubCategoryService:
    return SubCategoryService(SubCategoryRepository(db), CategoryRepository(db))


async def get_sub_category_service_for_write(db: WriteSession) -> SubCategoryService:
    return SubCategoryService(SubCategoryRepository(db), CategoryRepository(db))


async def get_tag_service(db: ReadSession) -> TagService:
    return TagService(TagRepository(db), PostRepository(db))


def _post_service(db, image_store: IImageStore) -> PostService:
    return PostService(
        PostRepository(db),
        CategoryRepository(db),
        SubCategoryRepository(db),
        TagRepository(db),
        image_store,
    )


async def get_post_service(db: ReadSession, image_store: ImageStore) -> PostService:
    return _post_service(db, image_store)


async def get_post_service_for_write(
    db: WriteSession, image_store: ImageStore
) -> PostService:
    return _post_service(db, image_store)


async def get_ad_service(db: ReadSession, image_store: ImageStore) -> AdService:
    return AdService(AdRepository(db), image_store)


async def get_ad_service_for_write(db: WriteSession, image_store: ImageStore) -> AdService:
    return AdService(AdRepository(db), image_store)


async def get_subscription_service(db: ReadSession) -> SubscriptionService:
    return SubscriptionService(SubscriptionRepository(db))


async def get_subscription_service_for_write(db: WriteSession) -> SubscriptionService:
    return SubscriptionService(SubscriptionRepository(db))


async def get_nav_menu_service(db: ReadSession) -> NavMenuService:
    return NavMenuService(NavMenuRepository(db), CategoryRepository(db))


async def get_nav_menu_service_for_write(db: WriteSession) -> NavMenuService:
    return NavMenuService(NavMenuRepository(db), CategoryRepository(db))


def get_image_upload_service(image_store: ImageStore) -> ImageUploadService:
    return ImageUploadService(image_store)
