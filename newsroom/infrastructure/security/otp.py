"""One-time code hashing.

Codes are stored as HMAC-SHA256(secret_key, code) so a leaked row does not
reveal a usable code, while verification stays a deterministic lookup.
"""

import hashlib
import hmac

from newsroom.core.config import get_settings


class HmacOtpHasher:
    """IOtpHasher keyed by the application secret."""

    def __init__(self, key: bytes | None = None) -> None:
        if key is None:
            key = get_settings().secret_key.get_secret_value().encode("utf-8")
        self._key = key

    def hash(self, code: str) -> str:
        return hmac.new(self._key, code.strip().encode("utf-8"), hashlib.sha256).hexdigest()
