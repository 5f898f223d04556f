"""Shared utilities: datetime, generators, network, slugs."""

from newsroom.shared.utils.datetime import ensure_utc, utc_now
from newsroom.shared.utils.generators import (
    generate_cuid,
    generate_object_id,
    generate_otp,
    is_object_id,
)
from newsroom.shared.utils.network import get_client_ip, normalize_ip
from newsroom.shared.utils.slugs import make_slug

__all__ = [
    "generate_cuid",
    "generate_object_id",
    "generate_otp",
    "is_object_id",
    "utc_now",
    "ensure_utc",
    "get_client_ip",
    "normalize_ip",
    "make_slug",
]
