"""Post API: multipart writes, feed, lookup with view tracking, search and filters."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select, update

from newsroom.infrastructure.persistence.models import PostView
from newsroom.shared.utils.datetime import utc_now
from tests.helpers import UNKNOWN_ID, image_file


@pytest.fixture
async def category(client: AsyncClient, admin_headers) -> dict:
    response = await client.post(
        "/api/v1/category", json={"name": "World News"}, headers=admin_headers
    )
    assert response.status_code == 201
    return response.json()["data"]


async def _create_post(client: AsyncClient, headers, category_id: str, **fields) -> dict:
    data = {
        "title": "Markets rally after rate decision",
        "content": "Stocks rose sharply on Thursday.",
        "category": category_id,
        **fields,
    }
    response = await client.post(
        "/api/v1/post", data=data, files=image_file(), headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_post_uploads_image_and_tags(
    client: AsyncClient, admin_headers, category, image_store
) -> None:
    post = await _create_post(
        client, admin_headers, category["id"], tags='["Economy", "markets", "economy"]'
    )
    assert post["slug"] == "markets-rally-after-rate-decision"
    assert post["category"]["id"] == category["id"]
    assert sorted(t["name"] for t in post["tags"]) == ["economy", "markets"]
    assert post["image"]["public_id"] == image_store.uploaded[0].public_id
    assert post["views"] == 0
    assert post["is_draft"] is False


async def test_create_post_requires_admin(client: AsyncClient, category) -> None:
    response = await client.post(
        "/api/v1/post",
        data={"title": "A long enough title", "content": "x", "category": category["id"]},
        files=image_file(),
    )
    assert response.status_code == 401


async def test_create_post_with_invalid_category_does_not_upload(
    client: AsyncClient, admin_headers, image_store, db_schema
) -> None:
    response = await client.post(
        "/api/v1/post",
        data={"title": "A long enough title", "content": "Body", "category": UNKNOWN_ID},
        files=image_file(),
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid Category ID"
    assert image_store.uploaded == []


async def test_create_post_rejects_non_image(
    client: AsyncClient, admin_headers, category
) -> None:
    response = await client.post(
        "/api/v1/post",
        data={"title": "A long enough title", "content": "Body", "category": category["id"]},
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Only image files are allowed"


async def test_create_post_short_title(client: AsyncClient, admin_headers, category) -> None:
    response = await client.post(
        "/api/v1/post",
        data={"title": "Short", "content": "Body", "category": category["id"]},
        files=image_file(),
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert "at least 10 characters" in response.json()["message"]


async def test_upload_failure_returns_500(
    client: AsyncClient, admin_headers, category, image_store
) -> None:
    image_store.fail_uploads = True
    response = await client.post(
        "/api/v1/post",
        data={"title": "A long enough title", "content": "Body", "category": category["id"]},
        files=image_file(),
        headers=admin_headers,
    )
    assert response.status_code == 500
    assert response.json()["error"] == "EXTERNAL_SERVICE_ERROR"


async def test_feed_separates_drafts(client: AsyncClient, admin_headers, category) -> None:
    await _create_post(client, admin_headers, category["id"], title="Published story one")
    await _create_post(
        client, admin_headers, category["id"], title="Draft story number two", is_draft="true"
    )

    published = (await client.get("/api/v1/post")).json()
    drafts = (await client.get("/api/v1/post", params={"is_draft": "true"})).json()

    assert published["count"] == 1
    assert published["data"][0]["title"] == "Published story one"
    assert drafts["count"] == 1
    assert drafts["data"][0]["is_draft"] is True


async def test_get_post_counts_one_view_per_viewer(
    client: AsyncClient, admin_headers, category, db_session
) -> None:
    post = await _create_post(client, admin_headers, category["id"])
    url = f"/api/v1/post/{post['id']}"

    for _ in range(3):
        assert (await client.get(url, headers={"X-Forwarded-For": "198.51.100.10"})).status_code == 200
    await client.get(url, headers={"X-Forwarded-For": "198.51.100.11"})

    feed = (await client.get("/api/v1/post")).json()
    assert feed["data"][0]["views"] == 2
    rows = await db_session.scalar(
        select(func.count(PostView.id)).where(PostView.post_id == post["id"])
    )
    assert rows == 2


async def test_view_counts_again_after_dedup_window(
    client: AsyncClient, admin_headers, category, db_session
) -> None:
    post = await _create_post(client, admin_headers, category["id"])
    url = f"/api/v1/post/{post['id']}"
    viewer = {"X-Forwarded-For": "198.51.100.20"}

    assert (await client.get(url, headers=viewer)).json()["data"]["views"] == 1
    await db_session.execute(
        update(PostView)
        .where(PostView.post_id == post["id"])
        .values(created_at=utc_now() - timedelta(hours=25))
    )
    await db_session.commit()

    assert (await client.get(url, headers=viewer)).json()["data"]["views"] == 2
    rows = await db_session.scalar(
        select(func.count(PostView.id)).where(PostView.post_id == post["id"])
    )
    assert rows == 2


async def test_get_post_malformed_id_is_404_without_ledger_row(
    client: AsyncClient, db_session
) -> None:
    response = await client.get("/api/v1/post/not-an-id")
    assert response.status_code == 404
    assert response.json()["message"] == "Post not found"
    assert await db_session.scalar(select(func.count(PostView.id))) == 0


async def test_get_unknown_post_is_404_without_ledger_row(
    client: AsyncClient, db_session
) -> None:
    response = await client.get(f"/api/v1/post/{UNKNOWN_ID}")
    assert response.status_code == 404
    assert await db_session.scalar(select(func.count(PostView.id))) == 0


async def test_update_post_replaces_image_and_clears_subcategory(
    client: AsyncClient, admin_headers, category, image_store
) -> None:
    sub = await client.post(
        "/api/v1/sub-category",
        json={"name": "Europe", "category_id": category["id"]},
        headers=admin_headers,
    )
    post = await _create_post(
        client, admin_headers, category["id"], sub_category=sub.json()["data"]["id"]
    )
    assert post["sub_category"]["name"] == "Europe"
    old_public_id = post["image"]["public_id"]

    response = await client.put(
        f"/api/v1/post/{post['id']}",
        data={"title": "Markets slump after rate decision", "sub_category": "null"},
        files=image_file("new.png"),
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["slug"] == "markets-slump-after-rate-decision"
    assert updated["sub_category"] is None
    assert updated["image"]["public_id"] != old_public_id
    assert image_store.deleted == [old_public_id]


async def test_update_without_image_keeps_image(
    client: AsyncClient, admin_headers, category, image_store
) -> None:
    post = await _create_post(client, admin_headers, category["id"])
    response = await client.put(
        f"/api/v1/post/{post['id']}",
        data={"is_favourite": "true", "tags": "breaking"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["is_favourite"] is True
    assert [t["name"] for t in body["tags"]] == ["breaking"]
    assert body["image"] == post["image"]
    assert image_store.deleted == []


async def test_delete_post_removes_image(
    client: AsyncClient, admin_headers, category, image_store
) -> None:
    post = await _create_post(client, admin_headers, category["id"])
    response = await client.delete(f"/api/v1/post/{post['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert image_store.deleted == [post["image"]["public_id"]]
    assert (await client.get(f"/api/v1/post/{post['id']}")).status_code == 404


async def test_search_matches_title_and_content(
    client: AsyncClient, admin_headers, category
) -> None:
    await _create_post(client, admin_headers, category["id"], title="Election results are in")
    await _create_post(
        client, admin_headers, category["id"], title="Weather for the weekend",
        content="Rain expected after the election rally",
    )
    await _create_post(client, admin_headers, category["id"], title="Football transfer news")

    response = await client.get("/api/v1/post/search", params={"query": "ELECTION"})
    body = response.json()
    assert response.status_code == 200
    assert body["pagination"]["total"] == 2
    assert {p["title"] for p in body["data"]} == {
        "Election results are in",
        "Weather for the weekend",
    }

    unknown_category = await client.get(
        "/api/v1/post/search", params={"query": "election", "category_name": "nope"}
    )
    assert unknown_category.json()["data"] == []


async def test_filter_by_all_category_and_tag(
    client: AsyncClient, admin_headers, category
) -> None:
    tagged = await _create_post(
        client, admin_headers, category["id"], title="Tagged story number one", tags="climate"
    )
    await _create_post(client, admin_headers, category["id"], title="Untagged story number two")

    all_posts = (await client.get("/api/v1/post/filter/all")).json()
    assert all_posts["meta"] == {
        "filter_type": "all",
        "filter_name": "All Posts",
        "filter_id": "all",
    }
    assert all_posts["pagination"]["total"] == 2

    by_category = (await client.get(f"/api/v1/post/filter/{category['id']}")).json()
    assert by_category["meta"]["filter_type"] == "category"
    assert by_category["meta"]["filter_name"] == "World News"

    tag_id = tagged["tags"][0]["id"]
    by_tag = (await client.get(f"/api/v1/post/filter/{tag_id}")).json()
    assert by_tag["meta"]["filter_type"] == "tag"
    assert [p["id"] for p in by_tag["data"]] == [tagged["id"]]

    missing = await client.get(f"/api/v1/post/filter/{UNKNOWN_ID}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "No category or tag found with this ID"

    malformed = await client.get("/api/v1/post/filter/xyz")
    assert malformed.status_code == 400


async def test_pagination_limits(client: AsyncClient, admin_headers, category) -> None:
    for i in range(3):
        await _create_post(client, admin_headers, category["id"], title=f"Numbered story {i}")
    body = (await client.get("/api/v1/post/filter/all", params={"page": 2, "limit": 2})).json()
    assert body["pagination"] == {"total": 3, "page": 2, "limit": 2, "pages": 2}
    assert len(body["data"]) == 1
