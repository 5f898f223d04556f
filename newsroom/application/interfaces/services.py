"""Service interfaces (ports) for the application layer.

Protocols for credential hashing, token issuing and the external
collaborators (image store, mail). Implementations live in infrastructure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from newsroom.application.dtos.content import StoredImage


class IPasswordHasher(Protocol):
    """Protocol for admin password hashing (bcrypt in production)."""

    async def hash(self, password: str) -> str: ...

    async def verify(self, password: str, hashed: str) -> bool: ...

    async def verify_dummy(self, password: str) -> None:
        """Spend the same time as verify() when the account does not exist."""


class IOtpHasher(Protocol):
    """Protocol for hashing one-time codes at rest (keyed, deterministic)."""

    def hash(self, code: str) -> str: ...


class ITokenService(Protocol):
    """Protocol for access token creation."""

    def create_access_token(self, subject: str, claims: dict[str, str]) -> str: ...

    @property
    def expires_in_seconds(self) -> int: ...


class IImageStore(Protocol):
    """Protocol for the external image store (DIP)."""

    async def upload(self, path: str, folder: str) -> StoredImage:
        """Upload a local file; raise ExternalServiceException on failure."""

    async def delete(self, public_id: str) -> None:
        """Best-effort delete; failures are logged, never raised."""


class IEmailSender(Protocol):
    """Protocol for outgoing mail (DIP)."""

    async def send(self, to: str, subject: str, html: str) -> None:
        """Send one message; raise ExternalServiceException on failure."""


class IEmailTemplateRenderer(Protocol):
    """Protocol for rendering a mail template into (subject, html)."""

    def render(self, template_key: str, **context: object) -> tuple[str, str]: ...
