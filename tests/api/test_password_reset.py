"""OTP password reset flow over HTTP: request, verify, reset."""

import re

from typing import Annotated

import pytest
from fastapi import Depends
from httpx import AsyncClient
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.api.v1.dependencies import get_admin_repo
from newsroom.infrastructure.exceptions import EmailDeliveryError
from newsroom.infrastructure.persistence import database
from newsroom.infrastructure.persistence.database import get_db
from newsroom.infrastructure.persistence.models import Admin
from newsroom.infrastructure.persistence.repositories import AdminRepository
from newsroom.main import app

REQUEST = "/api/v1/admin/request-verification"
VERIFY = "/api/v1/admin/verify-otp"
RESET = "/api/v1/admin/reset-password"


def _code_from(mail) -> str:
    match = re.search(r"\b(\d{6})\b", mail.html)
    assert match, "mail should contain a 6-digit code"
    return match.group(1)


def _wrong_code(code: str) -> str:
    return "100000" if code != "100000" else "100001"


async def test_full_flow_changes_password(
    client: AsyncClient, admin_account, mail_sender
) -> None:
    email = admin_account["email"]

    response = await client.post(REQUEST, json={"email": email})
    assert response.status_code == 200
    assert response.json()["message"] == "OTP sent to your email"
    assert len(mail_sender.outbox) == 1
    assert mail_sender.outbox[0].to == email
    assert mail_sender.outbox[0].subject.startswith("Verification Email from")
    code = _code_from(mail_sender.outbox[0])

    response = await client.post(VERIFY, json={"email": email, "otp": code})
    assert response.status_code == 200
    assert response.json()["message"].startswith("OTP verified successfully")

    response = await client.post(RESET, json={"email": email, "password": "a-new-secret-1"})
    assert response.status_code == 200

    old_login = await client.post(
        "/api/v1/admin/login", json={"email": email, "password": admin_account["password"]}
    )
    assert old_login.status_code == 401
    new_login = await client.post(
        "/api/v1/admin/login", json={"email": email, "password": "a-new-secret-1"}
    )
    assert new_login.status_code == 200

    # The session is closed: a second reset needs a new verification.
    again = await client.post(RESET, json={"email": email, "password": "another-secret-2"})
    assert again.status_code == 403
    assert again.json()["message"] == "Please verify your email first."


async def test_code_is_stored_hashed(
    client: AsyncClient, admin_account, mail_sender, db_session
) -> None:
    await client.post(REQUEST, json={"email": admin_account["email"]})
    code = _code_from(mail_sender.outbox[0])
    stored = await db_session.scalar(select(Admin.otp_hash).where(Admin.id == admin_account["id"]))
    assert stored is not None
    assert stored != code
    assert code not in stored


async def test_second_request_inside_cooldown_is_429(
    client: AsyncClient, admin_account, mail_sender
) -> None:
    first = await client.post(REQUEST, json={"email": admin_account["email"]})
    assert first.status_code == 200
    second = await client.post(REQUEST, json={"email": admin_account["email"]})
    assert second.status_code == 429
    assert second.json()["message"].startswith("Please wait")
    assert len(mail_sender.outbox) == 1


async def test_unknown_email_is_404(client: AsyncClient, db_schema) -> None:
    response = await client.post(REQUEST, json={"email": "ghost@example.com"})
    assert response.status_code == 404
    assert response.json()["message"] == "Admin not found."


async def test_three_wrong_codes_lock_the_account(
    client: AsyncClient, admin_account, mail_sender
) -> None:
    email = admin_account["email"]
    await client.post(REQUEST, json={"email": email})
    code = _code_from(mail_sender.outbox[0])
    wrong = _wrong_code(code)

    first = await client.post(VERIFY, json={"email": email, "otp": wrong})
    assert first.status_code == 400
    assert first.json()["message"] == "Wrong OTP. 2 attempts remaining"
    second = await client.post(VERIFY, json={"email": email, "otp": wrong})
    assert second.json()["message"] == "Wrong OTP. 1 attempt remaining"

    third = await client.post(VERIFY, json={"email": email, "otp": wrong})
    assert third.status_code == 429
    assert third.json()["message"] == "Too many failed attempts. Account locked for 30 minutes"

    # Even the right code is refused while locked.
    locked = await client.post(VERIFY, json={"email": email, "otp": code})
    assert locked.status_code == 403
    assert locked.json()["error"] == "ACCOUNT_LOCKED"
    assert locked.json()["message"].startswith("Account is locked")

    request_again = await client.post(REQUEST, json={"email": email})
    assert request_again.status_code == 403


async def test_verify_without_request_is_400(client: AsyncClient, admin_account) -> None:
    response = await client.post(
        VERIFY, json={"email": admin_account["email"], "otp": "123456"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "No active reset password session. Please request OTP first"


async def test_verify_twice_reports_already_verified(
    client: AsyncClient, admin_account, mail_sender
) -> None:
    email = admin_account["email"]
    await client.post(REQUEST, json={"email": email})
    code = _code_from(mail_sender.outbox[0])
    assert (await client.post(VERIFY, json={"email": email, "otp": code})).status_code == 200
    response = await client.post(VERIFY, json={"email": email, "otp": code})
    assert response.status_code == 400
    assert response.json()["message"] == "You are already verified"


@pytest.mark.parametrize("password", ["", "short"])
async def test_reset_rejects_short_password(
    client: AsyncClient, admin_account, password: str
) -> None:
    response = await client.post(
        RESET, json={"email": admin_account["email"], "password": password}
    )
    assert response.status_code == 400


async def test_mail_failure_returns_500_and_keeps_cooldown(
    client: AsyncClient, admin_account, mail_sender, monkeypatch
) -> None:
    async def failing_send(to: str, subject: str, html: str) -> None:
        raise EmailDeliveryError("smtp unreachable")

    monkeypatch.setattr(mail_sender, "send", failing_send)
    response = await client.post(REQUEST, json={"email": admin_account["email"]})
    assert response.status_code == 500
    assert response.json()["error"] == "EXTERNAL_SERVICE_ERROR"

    retry = await client.post(REQUEST, json={"email": admin_account["email"]})
    assert retry.status_code == 429


class _RacedAdminRepository(AdminRepository):
    """Lets another writer bump the version right after the admin was read."""

    async def get_by_email(self, email: str):
        admin = await super().get_by_email(email)
        async with database.get_session_factory()() as other:
            await other.execute(
                update(Admin).where(Admin.id == admin.id).values(version=Admin.version + 1)
            )
            await other.commit()
        return admin


async def test_concurrent_reset_write_returns_409(
    client: AsyncClient, admin_account, mail_sender, db_session
) -> None:
    async def raced_repo(db: Annotated[AsyncSession, Depends(get_db)]) -> AdminRepository:
        return _RacedAdminRepository(db)

    app.dependency_overrides[get_admin_repo] = raced_repo
    response = await client.post(REQUEST, json={"email": admin_account["email"]})

    assert response.status_code == 409
    assert response.json()["error"] == "CONFLICT"
    assert mail_sender.outbox == []
    row = (
        await db_session.execute(
            select(Admin.otp_hash, Admin.reset_session_active).where(
                Admin.id == admin_account["id"]
            )
        )
    ).one()
    assert row.otp_hash is None
    assert row.reset_session_active is False
