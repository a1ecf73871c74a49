"""FastAPI application entry point.

Wiring only: logging, backends, exception handlers, middleware, routers.
No business logic here. Settings are loaded inside create_app() so tests can
set env (and clear the get_settings cache) before building an app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskmanager.api.v1 import api_router
from taskmanager.core.config import get_settings
from taskmanager.core.exception_handlers import register_exception_handlers
from taskmanager.infrastructure.factory import BackendFactory
from taskmanager.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)
from taskmanager.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )
    # Built here rather than in a lifespan: Lambda runs with lifespan="off".
    app.state.backends = BackendFactory.create_backends(settings)

    register_exception_handlers(app)

    # Last added = outermost: timeout -> request ID -> security headers -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready (storage=%s, email=%s)",
        settings.app_name,
        settings.app_version,
        settings.storage_backend,
        settings.email_backend,
    )
    return app


app = create_app()
