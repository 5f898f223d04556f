"""Password reset sub-state of an admin credential record.

ResetSession is immutable: every transition returns a new instance together
with an optional rejection. The caller persists the new state whenever it
differs from the old one and only then raises the rejection, so rejected
transitions that mutate state (attempt counter, lockout, expired session)
are durable.
"""

import hmac
import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from newsroom.domain.exceptions import (
    AccountLockedException,
    AlreadyVerifiedException,
    EmailNotVerifiedException,
    InvalidOtpException,
    NoActiveResetSessionException,
    OtpAttemptsExceededException,
    OtpCooldownException,
    OtpExpiredException,
    ResetRejection,
    ResetSessionExpiredException,
)


class ResetSessionState(str, Enum):
    """Derived state of the reset flow."""

    NONE = "none"
    CODE_ISSUED = "code_issued"
    CODE_VERIFIED = "code_verified"
    LOCKED = "locked"


@dataclass(frozen=True)
class ResetPolicy:
    """Timers and limits of the reset flow."""

    otp_ttl: timedelta = timedelta(minutes=5)
    session_ttl: timedelta = timedelta(minutes=15)
    request_cooldown: timedelta = timedelta(seconds=60)
    max_attempts: int = 3
    lockout: timedelta = timedelta(minutes=30)

    @property
    def lockout_minutes(self) -> int:
        return math.ceil(self.lockout.total_seconds() / 60)


@dataclass(frozen=True)
class Transition:
    """Outcome of a transition: the next state and the rejection, if any."""

    state: "ResetSession"
    rejection: ResetRejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


@dataclass(frozen=True)
class ResetSession:
    """Reset-session fields of one admin.

    otp_hash holds a keyed hash of the pending code, never the code itself.
    """

    otp_hash: str | None = None
    otp_expires_at: datetime | None = None
    otp_verified: bool = False
    otp_attempts: int = 0
    locked_until: datetime | None = None
    last_otp_request_at: datetime | None = None
    session_active: bool = False
    session_expires_at: datetime | None = None

    def is_locked(self, now: datetime) -> bool:
        return self.locked_until is not None and self.locked_until > now

    def is_session_expired(self, now: datetime) -> bool:
        return self.session_expires_at is None or self.session_expires_at < now

    def state(self, now: datetime) -> ResetSessionState:
        """Return the derived state at ``now``."""
        if self.is_locked(now):
            return ResetSessionState.LOCKED
        if self.session_active and not self.is_session_expired(now):
            if self.otp_verified:
                return ResetSessionState.CODE_VERIFIED
            if self.otp_hash is not None:
                return ResetSessionState.CODE_ISSUED
        return ResetSessionState.NONE

    def request_code(
        self, now: datetime, otp_hash: str, policy: ResetPolicy
    ) -> Transition:
        """Issue a new code (already hashed by the caller).

        Rejected while locked, while a verified session is still open, and
        within the cooldown after the previous request.
        """
        if self.is_locked(now):
            return Transition(
                self,
                AccountLockedException((self.locked_until - now).total_seconds()),
            )
        if (
            self.otp_verified
            and self.session_active
            and not self.is_session_expired(now)
        ):
            return Transition(
                self,
                AlreadyVerifiedException(
                    "You are already verified and your reset session is still valid. "
                    "Please go to the resetPassword page."
                ),
            )
        if self.last_otp_request_at is not None:
            elapsed = now - self.last_otp_request_at
            if elapsed < policy.request_cooldown:
                remaining = policy.request_cooldown.total_seconds() - math.floor(
                    elapsed.total_seconds()
                )
                return Transition(self, OtpCooldownException(int(remaining)))
        issued = ResetSession(
            otp_hash=otp_hash,
            otp_expires_at=now + policy.otp_ttl,
            otp_verified=False,
            otp_attempts=0,
            locked_until=None,
            last_otp_request_at=now,
            session_active=True,
            session_expires_at=now + policy.session_ttl,
        )
        return Transition(issued)

    def verify_code(
        self, now: datetime, candidate_hash: str, policy: ResetPolicy
    ) -> Transition:
        """Check a submitted code (hashed with the same key as the stored one).

        Order of checks: already verified, locked, session active, session
        expiry, code expiry, comparison. The lockout check precedes the
        session check so a locked admin keeps getting the locked error even
        though the lockout also closed the session.
        """
        if self.otp_verified:
            return Transition(self, AlreadyVerifiedException())
        if self.is_locked(now):
            return Transition(
                self,
                AccountLockedException((self.locked_until - now).total_seconds()),
            )
        if not self.session_active:
            return Transition(
                self,
                NoActiveResetSessionException(
                    "No active reset password session. Please request OTP first"
                ),
            )
        if self.is_session_expired(now):
            closed = replace(
                self,
                otp_hash=None,
                otp_expires_at=None,
                otp_verified=False,
                session_active=False,
            )
            return Transition(
                closed,
                ResetSessionExpiredException(
                    "Reset session expired. Please request a new OTP"
                ),
            )
        if self.otp_expires_at is None or self.otp_expires_at < now:
            return Transition(self, OtpExpiredException())

        if self.otp_hash is None or not hmac.compare_digest(
            self.otp_hash, candidate_hash
        ):
            attempts = self.otp_attempts + 1
            if attempts >= policy.max_attempts:
                locked = replace(
                    self,
                    locked_until=now + policy.lockout,
                    otp_attempts=0,
                    otp_hash=None,
                    otp_expires_at=None,
                    session_active=False,
                    otp_verified=False,
                )
                return Transition(
                    locked, OtpAttemptsExceededException(policy.lockout_minutes)
                )
            return Transition(
                replace(self, otp_attempts=attempts),
                InvalidOtpException(policy.max_attempts - attempts),
            )

        verified = replace(
            self,
            otp_hash=None,
            otp_expires_at=None,
            locked_until=None,
            otp_attempts=0,
            otp_verified=True,
        )
        return Transition(verified)

    def authorize_password_change(self, now: datetime) -> Transition:
        """Gate a password change on a verified, open, unexpired session."""
        if not self.otp_verified:
            return Transition(self, EmailNotVerifiedException())
        if not self.session_active:
            return Transition(
                self,
                NoActiveResetSessionException(
                    "No active password reset session. Please verify OTP first"
                ),
            )
        if self.is_session_expired(now):
            closed = replace(self, session_active=False, otp_verified=False)
            return Transition(
                closed,
                ResetSessionExpiredException(
                    "Reset session expired. Please start over with OTP verification."
                ),
            )
        return Transition(self)

    def complete_password_change(self) -> "ResetSession":
        """Close the session after the credential was replaced."""
        return replace(
            self,
            session_active=False,
            session_expires_at=None,
            otp_verified=False,
        )
