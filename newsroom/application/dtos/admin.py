"""DTOs for admin authentication and password reset (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdminResult:
    """Admin read-model. Never carries the password hash or reset state."""

    id: str
    username: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class LoginResult:
    """Successful login: the profile plus a signed access token."""

    admin: AdminResult
    access_token: str
    expires_in_seconds: int


@dataclass(frozen=True)
class AuthenticatedAdmin:
    """Identity decoded from a valid access token."""

    id: str
    email: str
    username: str
