"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the JSON error envelope ``{"success": false, "message", "error"}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsroom.core.config import get_settings
from newsroom.domain.exceptions import NewsroomException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_IN_USE": 400,
    "AUTHENTICATION_ERROR": 401,
    "AUTHORIZATION_ERROR": 403,
    "ACCOUNT_LOCKED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "RATE_LIMITED": 429,
    "EXTERNAL_SERVICE_ERROR": 500,
    "SQL_NOT_CONFIGURED": 500,
}


def _error_body(message: str, error: str) -> dict[str, Any]:
    return {"success": False, "message": message, "error": error}


def _newsroom_exception_handler(
    request: Request, exc: NewsroomException
) -> JSONResponse:
    """Return JSON from NewsroomException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s %s", exc.error_code, exc.message, exc.details)
    include_details = not get_settings().is_production
    return JSONResponse(status_code=status, content=exc.to_dict(include_details))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with the first validation message."""
    errors = exc.errors()
    message = "Request validation failed"
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path", "form"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(status_code=400, content=_error_body(message, "VALIDATION_ERROR"))


def _integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Unique/foreign key violations that escaped the repositories -> 409."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=409, content=_error_body("Duplicate or conflicting value", "CONFLICT")
    )


def _rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """SlowAPI limit hit -> 429 envelope (plus the limiter's Retry-After headers)."""
    response = JSONResponse(
        status_code=429,
        content=_error_body(str(exc.detail), "RATE_LIMITED"),
    )
    limiter = getattr(request.app.state, "limiter", None)
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if limiter is not None and view_rate_limit is not None:
        response = limiter._inject_headers(response, view_rate_limit)
    return response


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), "HTTP_ERROR"),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is on outside production."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug and not settings.is_production else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body(detail, "INTERNAL_ERROR"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: NewsroomException (and
    subclasses), RequestValidationError, IntegrityError, RateLimitExceeded,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(NewsroomException, _newsroom_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(IntegrityError, _integrity_error_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
