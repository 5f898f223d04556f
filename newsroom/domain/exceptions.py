"""Domain exceptions for the newsroom application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers (by error_code).
"""

import math
from typing import Any


class NewsroomException(Exception):
    """Base exception for all newsroom application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, include_details: bool = False) -> dict[str, Any]:
        """Return the JSON error envelope for this exception."""
        body: dict[str, Any] = {
            "success": False,
            "message": self.message,
            "error": self.error_code,
        }
        if include_details and self.details:
            body["details"] = self.details
        return body


class ValidationException(NewsroomException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(NewsroomException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(NewsroomException):
    """Raised when a requested resource is not found."""

    def __init__(
        self, resource_type: str, resource_id: str, message: str | None = None
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'post', 'category').
            resource_id: The ID (or other lookup key) that was not found.
            message: Optional message; defaults to "<Type> not found".
        """
        super().__init__(
            message or f"{resource_type.capitalize()} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ResourceConflictException(NewsroomException):
    """Raised when a write collides with an existing unique value (e.g. duplicate name)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "CONFLICT", details)


class ResourceInUseException(NewsroomException):
    """Raised when deleting a resource that other records still reference."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "RESOURCE_IN_USE")


class ExternalServiceException(NewsroomException):
    """Raised when an external collaborator (image store, mail) fails."""

    def __init__(self, message: str, service: str, reason: str | None = None) -> None:
        details: dict[str, Any] = {"service": service}
        if reason:
            details["reason"] = reason
        super().__init__(message, "EXTERNAL_SERVICE_ERROR", details)


class SqlNotConfiguredException(NewsroomException):
    """Raised when the SQL engine cannot be created (DATABASE_URL missing)."""

    def __init__(self) -> None:
        super().__init__(
            "Database not configured. Set DATABASE_URL.",
            "SQL_NOT_CONFIGURED",
        )


# ---------------------------------------------------------------------------
# Password reset rejections. Returned by ResetSession transitions and raised
# by the password reset service after the new state is persisted.
# ---------------------------------------------------------------------------


class ResetRejection(NewsroomException):
    """Base class for rejected password-reset transitions."""


class AdminNotFoundException(ResetRejection):
    """Raised when no admin matches the e-mail of a reset request."""

    def __init__(self) -> None:
        super().__init__("Admin not found.", "RESOURCE_NOT_FOUND")


class AccountLockedException(ResetRejection):
    """Raised while the admin is locked out after too many wrong codes."""

    def __init__(self, remaining_seconds: float) -> None:
        minutes = max(1, math.ceil(remaining_seconds / 60))
        super().__init__(
            f"Account is locked. Try again after {minutes} minute{'s' if minutes != 1 else ''}.",
            "ACCOUNT_LOCKED",
            {"retry_after_minutes": minutes},
        )


class OtpCooldownException(ResetRejection):
    """Raised when a new code is requested before the cooldown has elapsed."""

    def __init__(self, remaining_seconds: int) -> None:
        super().__init__(
            f"Please wait {remaining_seconds} second{'s' if remaining_seconds != 1 else ''} "
            "before requesting a new OTP.",
            "RATE_LIMITED",
            {"retry_after_seconds": remaining_seconds},
        )


class AlreadyVerifiedException(ResetRejection):
    """Raised when the code was already verified and the session is still open."""

    def __init__(self, message: str = "You are already verified") -> None:
        super().__init__(message, "VALIDATION_ERROR")


class NoActiveResetSessionException(ResetRejection):
    """Raised when verify/reset is called without an active reset session."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "VALIDATION_ERROR")


class ResetSessionExpiredException(ResetRejection):
    """Raised when the reset session window has passed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "VALIDATION_ERROR")


class OtpExpiredException(ResetRejection):
    """Raised when the code itself has expired (session may still be open)."""

    def __init__(self) -> None:
        super().__init__("OTP has expired. Please request a new one.", "VALIDATION_ERROR")


class InvalidOtpException(ResetRejection):
    """Raised on a wrong code that did not yet trigger a lockout."""

    def __init__(self, attempts_remaining: int) -> None:
        super().__init__(
            f"Wrong OTP. {attempts_remaining} attempt{'s' if attempts_remaining != 1 else ''} remaining",
            "VALIDATION_ERROR",
            {"attempts_remaining": attempts_remaining},
        )


class OtpAttemptsExceededException(ResetRejection):
    """Raised on the wrong code that triggers the lockout."""

    def __init__(self, lockout_minutes: int) -> None:
        super().__init__(
            f"Too many failed attempts. Account locked for {lockout_minutes} minutes",
            "RATE_LIMITED",
            {"lockout_minutes": lockout_minutes},
        )


class EmailNotVerifiedException(ResetRejection):
    """Raised when a password change is attempted before the code was verified."""

    def __init__(self) -> None:
        super().__init__("Please verify your email first.", "AUTHORIZATION_ERROR")


class ResetSessionConflictException(NewsroomException):
    """Raised when a concurrent request changed the reset state first (optimistic lock)."""

    def __init__(self, admin_id: str) -> None:
        super().__init__(
            "Reset session was modified by another request; retry.",
            "CONFLICT",
            {"admin_id": admin_id},
        )
