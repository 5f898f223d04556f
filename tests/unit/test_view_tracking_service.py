"""ViewTrackingService: one counted view per viewer per window."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from newsroom.application.services.view_tracking_service import ViewTrackingService

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
POST_ID = "65f1c2a9b4e7d80012345678"


@pytest.fixture
def ledger():
    mock = AsyncMock()
    mock.should_count = AsyncMock(return_value=True)
    return mock


async def test_first_view_is_recorded_and_counted(ledger) -> None:
    svc = ViewTrackingService(ledger, timedelta(hours=24), clock=lambda: NOW)
    assert await svc.track(POST_ID, "203.0.113.7") is True
    ledger.should_count.assert_awaited_once_with(
        POST_ID, "203.0.113.7", NOW - timedelta(hours=24)
    )
    ledger.record_view.assert_awaited_once_with(POST_ID, "203.0.113.7")
    ledger.increment_views.assert_awaited_once_with(POST_ID)


async def test_repeat_view_inside_window_is_ignored(ledger) -> None:
    ledger.should_count = AsyncMock(return_value=False)
    svc = ViewTrackingService(ledger, clock=lambda: NOW)
    assert await svc.track(POST_ID, "203.0.113.7") is False
    ledger.record_view.assert_not_called()
    ledger.increment_views.assert_not_called()


@pytest.mark.parametrize("post_id", ["", "not-an-id", "65f1c2a9b4e7d8001234567", "z" * 24])
async def test_malformed_id_is_a_no_op(ledger, post_id: str) -> None:
    svc = ViewTrackingService(ledger, clock=lambda: NOW)
    assert await svc.track(post_id, "203.0.113.7") is False
    ledger.should_count.assert_not_called()
