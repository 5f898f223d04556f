"""HTTP middleware: request ID and security headers (raw ASGI).

Applied in main app; order matters (first added = innermost).
"""

from newsroom.middleware.request_id import RequestIDMiddleware
from newsroom.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RequestIDMiddleware", "SecurityHeadersMiddleware"]
