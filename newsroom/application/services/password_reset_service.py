"""Password reset: request a one-time code, verify it, then set a new password.

The reset sub-state transitions live on ResetSession; this service loads the
admin, applies a transition, persists the resulting state with a version
compare-and-swap, and only then raises the rejection (if any).
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime

from newsroom.application.interfaces.repositories import IAdminRepository
from newsroom.application.interfaces.services import (
    IEmailSender,
    IEmailTemplateRenderer,
    IOtpHasher,
    IPasswordHasher,
)
from newsroom.domain.entities.admin import AdminEntity
from newsroom.domain.exceptions import AdminNotFoundException
from newsroom.domain.value_objects.reset_session import ResetPolicy, Transition
from newsroom.shared.telemetry.logging import get_logger
from newsroom.shared.utils.datetime import utc_now
from newsroom.shared.utils.generators import generate_otp

logger = get_logger(__name__)

OTP_TEMPLATE_KEY = "password_reset_otp"


class PasswordResetService:
    """Drives the request -> verify -> reset flow for one admin at a time."""

    def __init__(
        self,
        admin_repo: IAdminRepository,
        otp_hasher: IOtpHasher,
        password_hasher: IPasswordHasher,
        email_sender: IEmailSender,
        template_renderer: IEmailTemplateRenderer,
        *,
        policy: ResetPolicy | None = None,
        clock: Callable[[], datetime] = utc_now,
        code_generator: Callable[[], str] = generate_otp,
        app_name: str = "newsroom",
    ) -> None:
        self.admin_repo = admin_repo
        self.otp_hasher = otp_hasher
        self.password_hasher = password_hasher
        self.email_sender = email_sender
        self.template_renderer = template_renderer
        self.policy = policy or ResetPolicy()
        self._clock = clock
        self._code_generator = code_generator
        self.app_name = app_name

    async def _get_admin(self, email: str) -> AdminEntity:
        admin = await self.admin_repo.get_by_email(email)
        if admin is None:
            raise AdminNotFoundException()
        return admin

    async def _apply(self, admin: AdminEntity, transition: Transition) -> None:
        """Persist a changed state, then raise the rejection if there is one."""
        if transition.state != admin.reset:
            admin.version = await self.admin_repo.save_reset_state(
                admin.id, admin.version, transition.state
            )
            admin.reset = transition.state
        if transition.rejection is not None:
            logger.info(
                "Password reset rejected: admin_id=%s reason=%s",
                admin.id,
                type(transition.rejection).__name__,
            )
            raise transition.rejection

    async def request_code(self, email: str) -> None:
        """Issue a code and e-mail it.

        The new state is committed before the mail is sent; a delivery
        failure propagates and leaves the issued code (and cooldown) in place.
        """
        admin = await self._get_admin(email)
        code = self._code_generator()
        transition = admin.reset.request_code(
            self._clock(), self.otp_hasher.hash(code), self.policy
        )
        await self._apply(admin, transition)
        subject, html = self.template_renderer.render(
            OTP_TEMPLATE_KEY,
            app_name=self.app_name,
            otp=code,
            expires_minutes=math.ceil(self.policy.otp_ttl.total_seconds() / 60),
        )
        await self.email_sender.send(admin.email, subject, html)
        logger.info("Password reset code issued: admin_id=%s", admin.id)

    async def verify_code(self, email: str, otp: str) -> None:
        admin = await self._get_admin(email)
        transition = admin.reset.verify_code(
            self._clock(), self.otp_hasher.hash(otp), self.policy
        )
        await self._apply(admin, transition)
        logger.info("Password reset code verified: admin_id=%s", admin.id)

    async def reset_password(self, email: str, new_password: str) -> None:
        """Replace the credential; requires a verified, open, unexpired session."""
        admin = await self._get_admin(email)
        await self._apply(admin, admin.reset.authorize_password_change(self._clock()))
        hashed = await self.password_hasher.hash(new_password)
        admin.version = await self.admin_repo.change_password(
            admin.id,
            admin.version,
            hashed,
            admin.reset.complete_password_change(),
        )
        logger.info("Password reset completed: admin_id=%s", admin.id)
