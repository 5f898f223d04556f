"""Application services: admin auth, password reset, view tracking, trending."""

from newsroom.application.services.admin_auth_service import AdminAuthService
from newsroom.application.services.password_reset_service import PasswordResetService
from newsroom.application.services.trending_service import TrendingService
from newsroom.application.services.view_tracking_service import ViewTrackingService

__all__ = [
    "AdminAuthService",
    "PasswordResetService",
    "TrendingService",
    "ViewTrackingService",
]
