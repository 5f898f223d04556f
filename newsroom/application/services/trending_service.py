"""Trending posts: ledger counts over widening windows, then recency."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from newsroom.application.dtos.trending import TrendingPostItem
from newsroom.application.interfaces.repositories import ITrendingQueries
from newsroom.shared.utils.datetime import utc_now


class TrendingService:
    """Fill up to ``limit`` slots from three tiers.

    1. views in the recent window, count desc
    2. views in the extended window, excluding tier 1, count desc
    3. newest non-draft posts, excluding both, view_count 0

    Ties inside a tier go to the newest post.
    """

    def __init__(
        self,
        queries: ITrendingQueries,
        limit: int = 4,
        recent_window: timedelta = timedelta(hours=24),
        extended_window: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.queries = queries
        self.limit = limit
        self.recent_window = recent_window
        self.extended_window = extended_window
        self._clock = clock

    async def get_trending(self) -> list[TrendingPostItem]:
        now = self._clock()
        items = await self.queries.most_viewed_since(
            now - self.recent_window, [], self.limit
        )
        if len(items) < self.limit:
            items += await self.queries.most_viewed_since(
                now - self.extended_window,
                [item.id for item in items],
                self.limit - len(items),
            )
        if len(items) < self.limit:
            items += await self.queries.latest_posts(
                [item.id for item in items], self.limit - len(items)
            )
        return items
