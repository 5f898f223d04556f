"""SMTP mail sender (aiosmtplib)."""

from __future__ import annotations

from email.message import EmailMessage

import aiosmtplib

from newsroom.infrastructure.exceptions import EmailDeliveryError
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SmtpEmailSender:
    """IEmailSender over SMTP with STARTTLS and login."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str,
        *,
        start_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self._password = password
        self.from_address = from_address
        self.start_tls = start_tls
        self.timeout = timeout

    def _build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")
        return message

    async def send(self, to: str, subject: str, html: str) -> None:
        message = self._build_message(to, subject, html)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self._password,
                start_tls=self.start_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("SMTP send failed via %s:%d: %s", self.host, self.port, e)
            raise EmailDeliveryError(str(e)) from e
        logger.info("Mail sent (subject=%r)", subject[:80])
