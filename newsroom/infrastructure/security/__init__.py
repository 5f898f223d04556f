"""Security: JWT, password hashing, and one-time code hashing."""

from newsroom.infrastructure.security.jwt import (
    JwtTokenService,
    TokenExpiredError,
    create_access_token,
    verify_token,
)
from newsroom.infrastructure.security.otp import HmacOtpHasher
from newsroom.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)

__all__ = [
    "BcryptPasswordHasher",
    "HmacOtpHasher",
    "JwtTokenService",
    "TokenExpiredError",
    "create_access_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
