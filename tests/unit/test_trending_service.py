"""TrendingService: three tiers filled in order up to the limit."""

from datetime import UTC, datetime, timedelta

from newsroom.api.v1.dependencies import services
from newsroom.application.dtos.content import StoredImage
from newsroom.application.dtos.trending import TrendingCategory, TrendingPostItem
from newsroom.application.services.trending_service import TrendingService
from newsroom.core.config import get_settings

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _item(post_id: str, views: int = 0) -> TrendingPostItem:
    return TrendingPostItem(
        id=post_id,
        view_count=views,
        title=f"Post {post_id}",
        image=StoredImage(url="u", public_id="p"),
        created_at=NOW,
        slug=post_id,
        category=TrendingCategory(),
    )


class FakeQueries:
    """ITrendingQueries returning canned rows and recording the calls."""

    def __init__(self, recent, extended, latest) -> None:
        self.recent = recent
        self.extended = extended
        self.latest = latest
        self.calls: list[tuple] = []

    async def most_viewed_since(self, since, exclude_ids, limit):
        self.calls.append(("viewed", since, list(exclude_ids), limit))
        rows = self.recent if since == NOW - timedelta(hours=24) else self.extended
        return [r for r in rows if r.id not in exclude_ids][:limit]

    async def latest_posts(self, exclude_ids, limit):
        self.calls.append(("latest", None, list(exclude_ids), limit))
        return [r for r in self.latest if r.id not in exclude_ids][:limit]


def _service(queries: FakeQueries) -> TrendingService:
    return TrendingService(queries, limit=4, clock=lambda: NOW)


async def test_recent_tier_fills_all_slots() -> None:
    queries = FakeQueries([_item(str(i), 10 - i) for i in range(5)], [], [])
    items = await _service(queries).get_trending()
    assert [i.id for i in items] == ["0", "1", "2", "3"]
    assert len(queries.calls) == 1


async def test_extended_tier_excludes_recent_posts() -> None:
    queries = FakeQueries(
        recent=[_item("a", 3)],
        extended=[_item("a", 9), _item("b", 5), _item("c", 2)],
        latest=[],
    )
    items = await _service(queries).get_trending()
    assert [i.id for i in items] == ["a", "b", "c"]
    assert items[0].view_count == 3
    assert queries.calls[1] == ("viewed", NOW - timedelta(days=7), ["a"], 3)


async def test_latest_tier_pads_with_zero_counts() -> None:
    queries = FakeQueries(
        recent=[_item("a", 2)],
        extended=[],
        latest=[_item("a"), _item("n1"), _item("n2"), _item("n3")],
    )
    items = await _service(queries).get_trending()
    assert [i.id for i in items] == ["a", "n1", "n2", "n3"]
    assert [i.view_count for i in items[1:]] == [0, 0, 0]
    assert queries.calls[-1] == ("latest", None, ["a"], 3)


async def test_no_posts_returns_empty_list() -> None:
    assert await _service(FakeQueries([], [], [])).get_trending() == []


async def test_trending_windows_come_from_their_own_settings(monkeypatch) -> None:
    settings = get_settings().model_copy(
        update={
            "view_dedup_window_hours": 2,
            "view_retention_days": 30,
            "trending_recent_window_hours": 12,
            "trending_extended_window_days": 3,
        }
    )
    monkeypatch.setattr(services, "get_settings", lambda: settings)

    svc = await services.get_trending_service(FakeQueries([], [], []))

    assert svc.recent_window == timedelta(hours=12)
    assert svc.extended_window == timedelta(days=3)


def test_trending_window_defaults() -> None:
    settings = get_settings()
    assert settings.trending_recent_window_hours == 24
    assert settings.trending_extended_window_days == 7
