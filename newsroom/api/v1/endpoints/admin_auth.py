"""Admin API: login/logout and the OTP password reset flow.

Reset endpoints are public (rate-limited); state transitions live in
PasswordResetService.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from newsroom.api.v1.dependencies import (
    CurrentAdmin,
    get_admin_auth_service,
    get_password_reset_service,
)
from newsroom.application.services import AdminAuthService, PasswordResetService
from newsroom.core.config import get_settings
from newsroom.core.limiter import limit_login, limit_otp
from newsroom.schemas.admin import (
    AdminResponse,
    LoginRequest,
    RequestVerificationRequest,
    ResetPasswordRequest,
    VerifyOtpRequest,
)
from newsroom.schemas.common import Envelope, MessageResponse

router = APIRouter()


def _cookie_options() -> dict:
    settings = get_settings()
    return {
        "key": settings.access_token_cookie_name,
        "httponly": True,
        "samesite": "strict",
        "secure": settings.is_production,
        "path": "/",
    }


@router.post("/login", response_model=Envelope[AdminResponse])
@limit_login
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    auth_svc: Annotated[AdminAuthService, Depends(get_admin_auth_service)],
):
    """Check credentials and set the accessToken cookie."""
    result = await auth_svc.login(body.normalized_email, body.password)
    response.set_cookie(
        value=result.access_token,
        max_age=result.expires_in_seconds,
        **_cookie_options(),
    )
    return Envelope[AdminResponse](
        message="Login successful",
        data=AdminResponse.model_validate(result.admin),
    )


@router.delete("/logout", response_model=MessageResponse)
async def logout(response: Response, _admin: CurrentAdmin):
    """Clear the accessToken cookie. Requires a valid token."""
    response.delete_cookie(**_cookie_options())
    return MessageResponse(message="Logged out successfully")


@router.post("/request-verification", response_model=MessageResponse)
@limit_otp
async def request_verification(
    request: Request,
    body: RequestVerificationRequest,
    reset_svc: Annotated[PasswordResetService, Depends(get_password_reset_service)],
):
    """Issue a one-time code and e-mail it to the admin."""
    await reset_svc.request_code(body.normalized_email)
    return MessageResponse(message="OTP sent to your email")


@router.post("/verify-otp", response_model=MessageResponse)
@limit_otp
async def verify_otp(
    request: Request,
    body: VerifyOtpRequest,
    reset_svc: Annotated[PasswordResetService, Depends(get_password_reset_service)],
):
    await reset_svc.verify_code(body.normalized_email, body.otp)
    return MessageResponse(
        message="OTP verified successfully. You can now reset your password"
    )


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    body: ResetPasswordRequest,
    reset_svc: Annotated[PasswordResetService, Depends(get_password_reset_service)],
):
    await reset_svc.reset_password(body.normalized_email, body.password)
    return MessageResponse(
        message="Password reset successful. You can now login with your new password."
    )
