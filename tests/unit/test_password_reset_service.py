"""PasswordResetService unit tests: persistence before rejection, mail after commit."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from newsroom.application.services.password_reset_service import PasswordResetService
from newsroom.domain.entities.admin import AdminEntity
from newsroom.domain.exceptions import (
    AdminNotFoundException,
    EmailNotVerifiedException,
    InvalidOtpException,
    OtpCooldownException,
)
from newsroom.domain.value_objects.reset_session import ResetPolicy, ResetSession
from newsroom.infrastructure.external.email import EmailTemplateRenderer
from newsroom.infrastructure.security.otp import HmacOtpHasher

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def admin() -> AdminEntity:
    return AdminEntity(
        id="adm_1",
        username="editor",
        email="editor@example.com",
        hashed_password="old-hash",
        version=1,
    )


@pytest.fixture
def admin_repo(admin: AdminEntity):
    repo = AsyncMock()
    repo.get_by_email = AsyncMock(return_value=admin)
    repo.save_reset_state = AsyncMock(side_effect=lambda _id, version, _state: version + 1)
    repo.change_password = AsyncMock(side_effect=lambda _id, version, _h, _s: version + 1)
    return repo


@pytest.fixture
def email_sender():
    return AsyncMock()


@pytest.fixture
def password_hasher():
    hasher = AsyncMock()
    hasher.hash = AsyncMock(return_value="new-hash")
    return hasher


@pytest.fixture
def clock() -> Clock:
    return Clock(NOW)


@pytest.fixture
def service(admin_repo, email_sender, password_hasher, clock) -> PasswordResetService:
    return PasswordResetService(
        admin_repo,
        HmacOtpHasher(b"unit-test-key"),
        password_hasher,
        email_sender,
        EmailTemplateRenderer(),
        policy=ResetPolicy(),
        clock=clock,
        code_generator=lambda: "123456",
        app_name="Daily Wire",
    )


async def test_request_code_persists_then_sends_mail(service, admin_repo, email_sender) -> None:
    await service.request_code("editor@example.com")

    admin_repo.save_reset_state.assert_awaited_once()
    _, version, state = admin_repo.save_reset_state.await_args.args
    assert version == 1
    assert state.otp_hash == HmacOtpHasher(b"unit-test-key").hash("123456")
    assert state.otp_hash != "123456"

    email_sender.send.assert_awaited_once()
    to, subject, html = email_sender.send.await_args.args
    assert to == "editor@example.com"
    assert subject == "Verification Email from Daily Wire"
    assert "123456" in html


async def test_request_code_unknown_email_raises_not_found(service, admin_repo, email_sender) -> None:
    admin_repo.get_by_email = AsyncMock(return_value=None)
    with pytest.raises(AdminNotFoundException):
        await service.request_code("nobody@example.com")
    email_sender.send.assert_not_called()


async def test_request_code_in_cooldown_does_not_write_or_send(
    service, admin, admin_repo, email_sender
) -> None:
    admin.reset = ResetSession(last_otp_request_at=NOW - timedelta(seconds=10))
    with pytest.raises(OtpCooldownException):
        await service.request_code("editor@example.com")
    admin_repo.save_reset_state.assert_not_called()
    email_sender.send.assert_not_called()


async def test_request_code_mail_failure_keeps_issued_state(
    service, admin_repo, email_sender
) -> None:
    email_sender.send = AsyncMock(side_effect=RuntimeError("smtp down"))
    with pytest.raises(RuntimeError):
        await service.request_code("editor@example.com")
    admin_repo.save_reset_state.assert_awaited_once()


async def test_wrong_code_is_persisted_before_rejection(service, admin, admin_repo, clock) -> None:
    await service.request_code("editor@example.com")
    clock.now = NOW + timedelta(seconds=30)

    with pytest.raises(InvalidOtpException):
        await service.verify_code("editor@example.com", "000000")

    assert admin_repo.save_reset_state.await_count == 2
    _, version, state = admin_repo.save_reset_state.await_args.args
    assert version == 2
    assert state.otp_attempts == 1
    assert admin.version == 3


async def test_full_flow_changes_password_and_closes_session(
    service, admin_repo, password_hasher, clock
) -> None:
    await service.request_code("editor@example.com")
    clock.now = NOW + timedelta(minutes=1)
    await service.verify_code("editor@example.com", "123456")
    clock.now = NOW + timedelta(minutes=2)
    await service.reset_password("editor@example.com", "brand-new-password")

    password_hasher.hash.assert_awaited_once_with("brand-new-password")
    _, version, hashed, state = admin_repo.change_password.await_args.args
    assert version == 3
    assert hashed == "new-hash"
    assert state.session_active is False
    assert state.otp_verified is False


async def test_reset_without_verification_is_rejected(service, admin_repo, password_hasher) -> None:
    with pytest.raises(EmailNotVerifiedException):
        await service.reset_password("editor@example.com", "brand-new-password")
    password_hasher.hash.assert_not_called()
    admin_repo.change_password.assert_not_called()


async def test_template_renderer_is_used_for_subject(admin_repo, email_sender, clock) -> None:
    renderer = MagicMock()
    renderer.render = MagicMock(return_value=("Subject", "<p>body</p>"))
    svc = PasswordResetService(
        admin_repo,
        HmacOtpHasher(b"k"),
        AsyncMock(),
        email_sender,
        renderer,
        clock=clock,
        code_generator=lambda: "654321",
    )
    await svc.request_code("editor@example.com")
    kwargs = renderer.render.call_args.kwargs
    assert renderer.render.call_args.args == ("password_reset_otp",)
    assert kwargs["otp"] == "654321"
    assert kwargs["expires_minutes"] == 5
    email_sender.send.assert_awaited_once_with("editor@example.com", "Subject", "<p>body</p>")
