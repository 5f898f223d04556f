"""Admin auth and password reset schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from newsroom.domain.entities.admin import normalize_email


class _EmailBody(BaseModel):
    email: EmailStr = Field(..., description="Admin e-mail (case-insensitive)")

    @property
    def normalized_email(self) -> str:
        return normalize_email(str(self.email))


class LoginRequest(BaseModel):
    """Login body. The e-mail is not format-checked: any mismatch is the same 401."""

    email: str = Field(..., max_length=254, description="Admin e-mail (case-insensitive)")
    password: str = Field(..., min_length=1)

    @property
    def normalized_email(self) -> str:
        return normalize_email(self.email)


class RequestVerificationRequest(_EmailBody):
    """Body for POST /admin/request-verification."""


class VerifyOtpRequest(_EmailBody):
    otp: str = Field(..., min_length=1, max_length=12, description="6-digit code")


class ResetPasswordRequest(_EmailBody):
    password: str = Field(..., min_length=8, description="New password (min 8 characters)")


class AdminResponse(BaseModel):
    """Admin profile. Never includes the password hash or reset state."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    created_at: datetime | None = None
