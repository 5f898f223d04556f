"""Admin login/logout and the protected-route guard."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from newsroom.infrastructure.security.jwt import create_access_token


async def test_login_sets_cookie_and_returns_profile(client: AsyncClient, admin_account) -> None:
    response = await client.post(
        "/api/v1/admin/login",
        json={"email": "Editor@Example.com", "password": admin_account["password"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["data"]["email"] == "editor@example.com"
    assert "hashed_password" not in body["data"]
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("accessToken=")
    assert "HttpOnly" in set_cookie
    assert "samesite=strict" in set_cookie.lower()


async def test_login_wrong_password_and_unknown_email_look_the_same(
    client: AsyncClient, admin_account
) -> None:
    wrong = await client.post(
        "/api/v1/admin/login",
        json={"email": admin_account["email"], "password": "not-the-password"},
    )
    unknown = await client.post(
        "/api/v1/admin/login",
        json={"email": "ghost@example.com", "password": "not-the-password"},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["message"] == unknown.json()["message"] == "Invalid email or password."


@pytest.mark.parametrize("email", ["not-an-email", "editor@newsroom.local", "editor@example.test"])
async def test_login_with_any_unmatched_email_is_generic_401(
    client: AsyncClient, admin_account, email: str
) -> None:
    response = await client.post(
        "/api/v1/admin/login", json={"email": email, "password": admin_account["password"]}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password."


async def test_logout_requires_token(client: AsyncClient) -> None:
    response = await client.delete("/api/v1/admin/logout")
    assert response.status_code == 401
    assert response.json()["message"] == "Not authorized. Please login."


async def test_logout_clears_cookie(client: AsyncClient, admin_headers) -> None:
    response = await client.delete("/api/v1/admin/logout", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"
    assert 'accessToken=""' in response.headers["set-cookie"]


async def test_expired_token_is_rejected(client: AsyncClient, admin_account) -> None:
    token = create_access_token(
        {"sub": admin_account["id"]}, expires_delta=timedelta(seconds=-5)
    )
    response = await client.delete(
        "/api/v1/admin/logout", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Token expired. Please login again."


async def test_garbage_token_is_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/category",
        json={"name": "World"},
        headers={"Authorization": "Bearer not.a.jwt"},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"
