"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See newsroom.core.lifespan and
newsroom.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from newsroom.api.v1 import api_router
from newsroom.core.config import get_settings
from newsroom.core.exception_handlers import register_exception_handlers
from newsroom.core.lifespan import create_lifespan
from newsroom.core.limiter import limiter
from newsroom.middleware import RequestIDMiddleware, SecurityHeadersMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    limiter.enabled = settings.rate_limit_enabled

    register_exception_handlers(app)

    # First added = innermost. Request ID ends up outermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    if settings.image_store_backend == "local":
        media_root = Path(settings.image_store_root)
        media_root.mkdir(parents=True, exist_ok=True)
        app.mount(
            settings.image_store_base_url,
            StaticFiles(directory=media_root),
            name="media",
        )

    return app


app = create_app()
