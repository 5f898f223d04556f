"""ResetSession transitions: request, verify, authorize and complete."""

from datetime import UTC, datetime, timedelta

import pytest

from newsroom.domain.exceptions import (
    AccountLockedException,
    AlreadyVerifiedException,
    EmailNotVerifiedException,
    InvalidOtpException,
    NoActiveResetSessionException,
    OtpAttemptsExceededException,
    OtpCooldownException,
    OtpExpiredException,
    ResetSessionExpiredException,
)
from newsroom.domain.value_objects.reset_session import (
    ResetPolicy,
    ResetSession,
    ResetSessionState,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
POLICY = ResetPolicy()
GOOD = "hash-of-123456"
BAD = "hash-of-000000"


def _issued(at: datetime = NOW) -> ResetSession:
    transition = ResetSession().request_code(at, GOOD, POLICY)
    assert transition.accepted
    return transition.state


def _verified(at: datetime = NOW) -> ResetSession:
    transition = _issued(at).verify_code(at + timedelta(seconds=30), GOOD, POLICY)
    assert transition.accepted
    return transition.state


def test_fresh_session_is_none() -> None:
    assert ResetSession().state(NOW) is ResetSessionState.NONE


def test_request_code_opens_session_and_resets_counters() -> None:
    state = _issued()
    assert state.state(NOW) is ResetSessionState.CODE_ISSUED
    assert state.otp_hash == GOOD
    assert state.otp_attempts == 0
    assert state.otp_expires_at == NOW + timedelta(minutes=5)
    assert state.session_expires_at == NOW + timedelta(minutes=15)
    assert state.last_otp_request_at == NOW


def test_request_code_within_cooldown_is_rejected_without_change() -> None:
    state = _issued()
    transition = state.request_code(NOW + timedelta(seconds=20), "other", POLICY)
    assert isinstance(transition.rejection, OtpCooldownException)
    assert transition.rejection.details["retry_after_seconds"] == 40
    assert transition.state is state


def test_request_code_after_cooldown_replaces_code() -> None:
    state = _issued()
    transition = state.request_code(NOW + timedelta(seconds=61), "second", POLICY)
    assert transition.accepted
    assert transition.state.otp_hash == "second"


def test_request_code_while_verified_session_open_is_rejected() -> None:
    state = _verified()
    transition = state.request_code(NOW + timedelta(minutes=2), "again", POLICY)
    assert isinstance(transition.rejection, AlreadyVerifiedException)


def test_request_code_while_locked_is_rejected() -> None:
    state = ResetSession(locked_until=NOW + timedelta(minutes=10))
    transition = state.request_code(NOW, GOOD, POLICY)
    assert isinstance(transition.rejection, AccountLockedException)
    assert transition.rejection.details["retry_after_minutes"] == 10


def test_verify_correct_code_marks_verified_and_clears_code() -> None:
    state = _verified()
    assert state.otp_verified is True
    assert state.otp_hash is None
    assert state.otp_attempts == 0
    assert state.session_active is True
    assert state.state(NOW + timedelta(minutes=1)) is ResetSessionState.CODE_VERIFIED


def test_verify_twice_reports_already_verified() -> None:
    transition = _verified().verify_code(NOW + timedelta(minutes=1), GOOD, POLICY)
    assert isinstance(transition.rejection, AlreadyVerifiedException)


def test_verify_wrong_code_counts_attempts() -> None:
    transition = _issued().verify_code(NOW, BAD, POLICY)
    assert isinstance(transition.rejection, InvalidOtpException)
    assert transition.rejection.details["attempts_remaining"] == 2
    assert transition.state.otp_attempts == 1


def test_third_wrong_code_locks_and_closes_session() -> None:
    state = _issued()
    for _ in range(2):
        state = state.verify_code(NOW, BAD, POLICY).state
    transition = state.verify_code(NOW, BAD, POLICY)
    assert isinstance(transition.rejection, OtpAttemptsExceededException)
    locked = transition.state
    assert locked.locked_until == NOW + timedelta(minutes=30)
    assert locked.otp_attempts == 0
    assert locked.otp_hash is None
    assert locked.session_active is False
    assert locked.state(NOW) is ResetSessionState.LOCKED


def test_verify_while_locked_reports_lock_before_missing_session() -> None:
    state = ResetSession(locked_until=NOW + timedelta(minutes=5), session_active=False)
    transition = state.verify_code(NOW, GOOD, POLICY)
    assert isinstance(transition.rejection, AccountLockedException)


def test_lock_expires() -> None:
    state = ResetSession(locked_until=NOW - timedelta(seconds=1))
    assert state.request_code(NOW, GOOD, POLICY).accepted


def test_verify_without_session_is_rejected() -> None:
    transition = ResetSession().verify_code(NOW, GOOD, POLICY)
    assert isinstance(transition.rejection, NoActiveResetSessionException)


def test_verify_after_session_expiry_closes_session() -> None:
    transition = _issued().verify_code(NOW + timedelta(minutes=16), GOOD, POLICY)
    assert isinstance(transition.rejection, ResetSessionExpiredException)
    assert transition.state.session_active is False
    assert transition.state.otp_hash is None


def test_verify_expired_code_inside_open_session() -> None:
    transition = _issued().verify_code(NOW + timedelta(minutes=6), GOOD, POLICY)
    assert isinstance(transition.rejection, OtpExpiredException)
    assert transition.state.session_active is True


def test_authorize_requires_verification() -> None:
    transition = _issued().authorize_password_change(NOW)
    assert isinstance(transition.rejection, EmailNotVerifiedException)
    assert transition.rejection.error_code == "AUTHORIZATION_ERROR"


def test_authorize_after_session_expiry_closes_session() -> None:
    transition = _verified().authorize_password_change(NOW + timedelta(minutes=20))
    assert isinstance(transition.rejection, ResetSessionExpiredException)
    assert transition.state.session_active is False
    assert transition.state.otp_verified is False


def test_complete_password_change_returns_to_none() -> None:
    state = _verified()
    assert state.authorize_password_change(NOW + timedelta(minutes=1)).accepted
    done = state.complete_password_change()
    assert done.state(NOW + timedelta(minutes=1)) is ResetSessionState.NONE
    # A fresh request is possible once the cooldown has passed.
    assert done.request_code(NOW + timedelta(minutes=2), GOOD, POLICY).accepted


@pytest.mark.parametrize(
    ("remaining", "expected"),
    [(1, "1 minute."), (59, "1 minute."), (61, "2 minutes."), (1800, "30 minutes.")],
)
def test_locked_message_rounds_minutes_up(remaining: float, expected: str) -> None:
    assert AccountLockedException(remaining).message.endswith(expected)
