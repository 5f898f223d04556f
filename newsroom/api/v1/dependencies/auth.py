"""Admin authentication dependencies.

The access token is read from the ``accessToken`` cookie, falling back to
``Authorization: Bearer``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from newsroom.application.dtos.admin import AuthenticatedAdmin
from newsroom.core.config import get_settings
from newsroom.domain.exceptions import AuthenticationException
from newsroom.infrastructure.security.jwt import TokenExpiredError, verify_token

_http_bearer = HTTPBearer(auto_error=False)


def _extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    token = request.cookies.get(get_settings().access_token_cookie_name)
    if token:
        return token
    if credentials and credentials.credentials:
        return credentials.credentials
    return None


async def get_current_admin(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> AuthenticatedAdmin:
    """Return the admin identity from a valid token; raise 401 otherwise."""
    token = _extract_token(request, credentials)
    if not token:
        raise AuthenticationException("Not authorized. Please login.")
    try:
        payload = verify_token(token)
    except TokenExpiredError:
        raise AuthenticationException("Token expired. Please login again.") from None
    except ValueError:
        raise AuthenticationException("Invalid token") from None
    return AuthenticatedAdmin(
        id=str(payload["sub"]),
        email=str(payload.get("email", "")),
        username=str(payload.get("username", "")),
    )


CurrentAdmin = Annotated[AuthenticatedAdmin, Depends(get_current_admin)]
