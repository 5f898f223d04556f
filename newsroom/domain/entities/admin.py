"""Admin domain entity.

Represents an administrator credential record independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime

from newsroom.domain.exceptions import ValidationException
from newsroom.domain.value_objects.reset_session import ResetSession

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 30


def normalize_email(email: str) -> str:
    """Admin e-mail identity is case-insensitive."""
    return email.strip().lower()


@dataclass
class AdminEntity:
    """Domain entity for an admin and its password reset sub-state.

    ``version`` is the optimistic-lock token read together with the reset
    state; writes of a new reset state must present it.
    """

    id: str
    username: str
    email: str
    hashed_password: str
    reset: ResetSession = field(default_factory=ResetSession)
    version: int = 1
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate admin business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Admin ID is required", field="id")
        name = (self.username or "").strip()
        if not USERNAME_MIN_LENGTH <= len(name) <= USERNAME_MAX_LENGTH:
            raise ValidationException(
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters",
                field="username",
            )
        if not self.email or "@" not in self.email:
            raise ValidationException("A valid email is required", field="email")
        if not self.hashed_password:
            raise ValidationException("Password hash is required", field="hashed_password")
