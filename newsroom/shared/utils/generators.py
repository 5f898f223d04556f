"""ID and value generators (CUID, object ids, one-time codes)."""

import re
import secrets
import time

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# Public content ids (posts, categories, tags, ads, ...) are 24 hex chars.
OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

OTP_MIN = 100_000
OTP_MAX = 999_999


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Used for internal records (admins, view ledger rows, nav menu).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_object_id() -> str:
    """Generate a 24 hex char id for public content.

    Layout: 4-byte big-endian seconds timestamp followed by 8 random bytes,
    so ids sort roughly by creation time and match ``OBJECT_ID_RE``.
    """
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def generate_otp() -> str:
    """Return a 6-digit one-time code, uniform in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def is_object_id(value: str | None) -> bool:
    """True when value is a 24 hex char content id."""
    return bool(value) and OBJECT_ID_RE.fullmatch(value) is not None
