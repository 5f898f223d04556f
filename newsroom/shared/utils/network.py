"""Client address extraction for view de-duplication."""

from starlette.requests import Request

UNKNOWN_CLIENT = "unknown"
_IPV4_MAPPED_PREFIX = "::ffff:"


def normalize_ip(raw: str | None) -> str:
    """Normalize a client address so the same viewer maps to one key.

    - missing/blank -> "unknown"
    - IPv6 loopback ``::1`` -> ``127.0.0.1``
    - IPv4-mapped IPv6 (``::ffff:1.2.3.4``) -> ``1.2.3.4``
    """
    if raw is None:
        return UNKNOWN_CLIENT
    ip = raw.strip()
    if not ip:
        return UNKNOWN_CLIENT
    if ip == "::1":
        return "127.0.0.1"
    if ip.lower().startswith(_IPV4_MAPPED_PREFIX):
        return ip[len(_IPV4_MAPPED_PREFIX):]
    return ip


def get_client_ip(request: Request, trust_proxy_headers: bool = True) -> str:
    """Return the normalized viewer address of a request.

    The first ``X-Forwarded-For`` hop wins when proxy headers are trusted;
    otherwise the socket peer is used.
    """
    if trust_proxy_headers:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first_hop = forwarded.split(",")[0]
            if first_hop.strip():
                return normalize_ip(first_hop)
    client = request.client
    return normalize_ip(client.host if client else None)
