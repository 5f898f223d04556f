"""Outgoing mail: log-only and SMTP senders, factory, and message templates."""

from newsroom.infrastructure.external.email.factory import EmailSenderFactory
from newsroom.infrastructure.external.email.log_sender import LogOnlyEmailSender
from newsroom.infrastructure.external.email.templates import EmailTemplateRenderer

__all__ = ["EmailSenderFactory", "EmailTemplateRenderer", "LogOnlyEmailSender"]
