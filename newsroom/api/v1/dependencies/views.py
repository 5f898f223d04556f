"""View tracking pre-step for the single-post read."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from newsroom.api.v1.dependencies.services import get_view_tracking_service
from newsroom.application.services import ViewTrackingService
from newsroom.core.config import get_settings
from newsroom.shared.utils.network import get_client_ip


async def track_post_view(
    post_id: str,
    request: Request,
    tracker: Annotated[ViewTrackingService, Depends(get_view_tracking_service)],
) -> None:
    """Count one view per viewer address per window before the post is read."""
    viewer_ip = get_client_ip(request, get_settings().trust_proxy_headers)
    await tracker.track(post_id, viewer_ip)
