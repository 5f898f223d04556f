"""Mail sender factory: log-only or SMTP from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from newsroom.application.interfaces.services import IEmailSender
from newsroom.infrastructure.external.email.log_sender import LogOnlyEmailSender
from newsroom.infrastructure.external.email.smtp_sender import SmtpEmailSender

if TYPE_CHECKING:
    from newsroom.core.config import Settings


class EmailSenderFactory:
    """Factory for mail sender instances based on MAIL_BACKEND."""

    @staticmethod
    def create_sender(settings: "Settings | None" = None) -> IEmailSender:
        """Create the configured sender.

        Raises:
            ValueError: If the backend is unknown.
        """
        from newsroom.core.config import get_settings

        s = settings or get_settings()
        backend = s.mail_backend.lower()
        if backend == "log":
            return LogOnlyEmailSender()
        if backend == "smtp":
            return SmtpEmailSender(
                host=s.smtp_host,
                port=s.smtp_port,
                username=s.smtp_username or "",
                password=s.smtp_password.get_secret_value() if s.smtp_password else "",
                from_address=s.mail_from_address,
                start_tls=s.smtp_start_tls,
                timeout=float(s.smtp_timeout_seconds),
            )
        raise ValueError(f"Unknown mail backend: {backend}. Supported: 'log', 'smtp'")
