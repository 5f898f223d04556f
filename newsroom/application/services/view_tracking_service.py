"""Count a post view at most once per viewer per rolling window."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta

from newsroom.application.interfaces.repositories import IPostViewLedger
from newsroom.shared.utils.datetime import utc_now
from newsroom.shared.utils.generators import is_object_id


class ViewTrackingService:
    """Pre-step of the single-post read.

    Two simultaneous first views from the same address can both pass the
    lookup and both count; the counter is approximate.
    """

    def __init__(
        self,
        ledger: IPostViewLedger,
        dedup_window: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.ledger = ledger
        self.dedup_window = dedup_window
        self._clock = clock

    async def track(self, post_id: str, viewer_ip: str) -> bool:
        """Record the view and bump the counter; return True when it counted.

        Malformed ids and unknown posts are a no-op.
        """
        if not is_object_id(post_id):
            return False
        since = self._clock() - self.dedup_window
        if not await self.ledger.should_count(post_id, viewer_ip, since):
            return False
        await asyncio.gather(
            self.ledger.record_view(post_id, viewer_ip),
            self.ledger.increment_views(post_id),
        )
        return True
