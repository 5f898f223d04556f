"""Admin login: credential check and access token issuing."""

from __future__ import annotations

from newsroom.application.dtos.admin import AdminResult, LoginResult
from newsroom.application.interfaces.repositories import IAdminRepository
from newsroom.application.interfaces.services import IPasswordHasher, ITokenService
from newsroom.domain.exceptions import AuthenticationException

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


class AdminAuthService:
    """Authenticate an admin by e-mail and password.

    Unknown e-mail and wrong password fail identically; the unknown case
    still runs a bcrypt comparison against a dummy hash.
    """

    def __init__(
        self,
        admin_repo: IAdminRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def login(self, email: str, password: str) -> LoginResult:
        admin = await self.admin_repo.get_by_email(email)
        if admin is None:
            await self.password_hasher.verify_dummy(password)
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE)
        if not await self.password_hasher.verify(password, admin.hashed_password):
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE)
        token = self.token_service.create_access_token(
            admin.id, {"email": admin.email, "username": admin.username}
        )
        return LoginResult(
            admin=AdminResult(
                id=admin.id,
                username=admin.username,
                email=admin.email,
                created_at=admin.created_at,
            ),
            access_token=token,
            expires_in_seconds=self.token_service.expires_in_seconds,
        )
