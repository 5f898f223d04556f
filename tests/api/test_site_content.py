"""Ads, newsletter subscriptions, navigation menu and standalone uploads."""

import pytest
from httpx import AsyncClient

from tests.helpers import UNKNOWN_ID, image_file


# ---- ads ------------------------------------------------------------------


async def _create_ad(client: AsyncClient, headers, **fields) -> dict:
    data = {"title": "Spring sale", "type": "horizontal", "link": "https://shop.test", **fields}
    response = await client.post("/api/v1/ads", data=data, files=image_file(), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_ad_defaults_to_active(
    client: AsyncClient, admin_headers, image_store
) -> None:
    ad = await _create_ad(client, admin_headers)
    assert ad["type"] == "horizontal"
    assert ad["is_active"] is True
    assert ad["image"]["public_id"] == "news-ads/0"


async def test_create_ad_rejects_unknown_type(
    client: AsyncClient, admin_headers, image_store
) -> None:
    response = await client.post(
        "/api/v1/ads",
        data={"title": "Banner", "type": "vertical", "link": "https://shop.test"},
        files=image_file(),
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid type. Must be 'horizontal' or 'square'"
    assert image_store.uploaded == []


async def test_list_ads_filters(client: AsyncClient, admin_headers) -> None:
    await _create_ad(client, admin_headers)
    square = await _create_ad(client, admin_headers, type="square", is_active="false")

    by_type = (await client.get("/api/v1/ads", params={"type": "square"})).json()
    assert [a["id"] for a in by_type["data"]] == [square["id"]]
    active = (await client.get("/api/v1/ads", params={"is_active": "true"})).json()
    assert active["count"] == 1
    assert (await client.get("/api/v1/ads", params={"type": "banner"})).status_code == 400


async def test_toggle_and_update_ad(client: AsyncClient, admin_headers, image_store) -> None:
    ad = await _create_ad(client, admin_headers)
    toggled = await client.patch(f"/api/v1/ads/{ad['id']}/toggle", headers=admin_headers)
    assert toggled.json()["message"] == "Ad deactivated successfully"

    updated = await client.put(
        f"/api/v1/ads/{ad['id']}",
        data={"title": "Summer sale"},
        files=image_file("new.jpg"),
        headers=admin_headers,
    )
    assert updated.status_code == 200
    data = updated.json()["data"]
    assert data["title"] == "Summer sale"
    assert data["is_active"] is False
    assert data["image"]["public_id"] == "news-ads/1"
    assert image_store.deleted == ["news-ads/0"]


async def test_delete_ad_removes_image(client: AsyncClient, admin_headers, image_store) -> None:
    ad = await _create_ad(client, admin_headers)
    response = await client.delete(f"/api/v1/ads/{ad['id']}", headers=admin_headers)
    assert response.json()["message"] == "Ad deleted successfully"
    assert image_store.deleted == [ad["image"]["public_id"]]
    assert (await client.delete(f"/api/v1/ads/{ad['id']}", headers=admin_headers)).status_code == 404


# ---- subscriptions --------------------------------------------------------


async def test_subscribe_and_duplicate(client: AsyncClient, db_schema) -> None:
    first = await client.post("/api/v1/subscriptions", json={"email": "Reader@Example.com"})
    assert first.status_code == 201
    assert first.json()["data"]["email"] == "reader@example.com"

    again = await client.post("/api/v1/subscriptions", json={"email": "reader@example.com"})
    assert again.status_code == 409
    assert again.json()["message"] == "This email is already subscribed"


async def test_subscribe_rejects_invalid_email(client: AsyncClient, db_schema) -> None:
    response = await client.post("/api/v1/subscriptions", json={"email": "not-an-email"})
    assert response.status_code == 400


async def test_admin_lists_and_deletes_subscriptions(
    client: AsyncClient, admin_headers
) -> None:
    for email in ("a@example.com", "b@example.com", "c@example.com"):
        await client.post("/api/v1/subscriptions", json={"email": email})

    assert (await client.get("/api/v1/subscriptions")).status_code == 401
    page = await client.get(
        "/api/v1/subscriptions", params={"limit": 2}, headers=admin_headers
    )
    body = page.json()
    assert body["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}
    assert len(body["data"]) == 2

    target = body["data"][0]["id"]
    deleted = await client.delete(f"/api/v1/subscriptions/{target}", headers=admin_headers)
    assert deleted.status_code == 200
    again = await client.delete(f"/api/v1/subscriptions/{target}", headers=admin_headers)
    assert again.status_code == 404


# ---- navigation menu ------------------------------------------------------


@pytest.fixture
async def categories(client: AsyncClient, admin_headers) -> list[dict]:
    created = []
    for name in ("Politics", "Business", "Culture"):
        response = await client.post(
            "/api/v1/category", json={"name": name}, headers=admin_headers
        )
        created.append(response.json()["data"])
    return created


async def test_nav_menu_starts_empty(client: AsyncClient, db_schema) -> None:
    response = await client.get("/api/v1/nav-menu")
    assert response.status_code == 200
    assert response.json()["data"]["categories"] == []


async def test_nav_menu_keeps_order(client: AsyncClient, admin_headers, categories) -> None:
    order = [categories[2]["id"], categories[0]["id"]]
    updated = await client.put(
        "/api/v1/nav-menu", json={"category_ids": order}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["message"] == "Nav menu updated"

    menu = (await client.get("/api/v1/nav-menu")).json()["data"]
    assert [c["name"] for c in menu["categories"]] == ["Culture", "Politics"]
    assert menu["updated_at"] is not None


async def test_nav_menu_limits_and_unknown_ids(
    client: AsyncClient, admin_headers, categories
) -> None:
    too_many = [f"{i:024x}" for i in range(11)]
    response = await client.put(
        "/api/v1/nav-menu", json={"category_ids": too_many}, headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Provide an array of max 10 IDs."

    unknown = await client.put(
        "/api/v1/nav-menu",
        json={"category_ids": [categories[0]["id"], UNKNOWN_ID]},
        headers=admin_headers,
    )
    assert unknown.status_code == 404


async def test_nav_menu_requires_admin(client: AsyncClient, db_schema) -> None:
    response = await client.put("/api/v1/nav-menu", json={"category_ids": []})
    assert response.status_code == 401


# ---- uploads --------------------------------------------------------------


async def test_upload_image(client: AsyncClient, admin_headers, image_store) -> None:
    response = await client.post("/api/v1/upload", files=image_file(), headers=admin_headers)
    assert response.status_code == 201
    assert response.json() == {
        "url": image_store.uploaded[0].url,
        "public_id": image_store.uploaded[0].public_id,
    }


async def test_upload_rejects_non_images(client: AsyncClient, admin_headers, image_store) -> None:
    response = await client.post(
        "/api/v1/upload",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert image_store.uploaded == []
