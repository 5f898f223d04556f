"""Log-only mail sender for development and tests."""

from __future__ import annotations

import logging

from newsroom.shared.telemetry.logging import get_logger
from newsroom.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyEmailSender:
    """IEmailSender implementation that logs instead of sending email.

    Use when no SMTP is configured. Only the subject is logged at INFO; the
    recipient is logged at DEBUG and the body (which carries the one-time
    code) is never logged.
    """

    async def send(self, to: str, subject: str, html: str) -> None:
        subject_preview = (subject or "")[:80]
        logger.info("Mail: would send message (subject=%r)", subject_preview)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Mail recipient: %s (at %s, %d bytes)",
                to,
                utc_now().isoformat(),
                len(html or ""),
            )
