"""Security headers middleware.

Adds security response headers; HSTS only when served in production.
Raw ASGI (no BaseHTTPMiddleware). Headers already set by a route win.
"""

from typing import Callable

DEFAULT_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    "Cross-Origin-Resource-Policy": "cross-origin",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    *,
    hsts: bool = False,
) -> Callable:
    """Set security headers on all HTTP responses."""
    resolved = dict(headers if headers is not None else DEFAULT_HEADERS)
    if hsts:
        resolved.setdefault(*HSTS_HEADER)
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
