"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.responses import plain_status
from application.exceptions import RecordError, RecordNotFoundError
from backend.logging_config import setup_logging
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings.log_level)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Capture Records API",
        description="Read-only inspection API over captured HTTP traffic",
        version="1.0.0",
    )

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Map errors to bare status replies
    _register_exception_handlers(app)

    # Include API routers
    _include_routers(app)

    logger.info(
        f"Capture Records API created (environment={settings.environment}, "
        f"table={settings.records_table})"
    )

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for capture-records-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "Content-Range", "Last-Modified"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Reply to every failure with a status code and its standard phrase.

    Internal error text is logged, never sent to the client.
    """

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return plain_status(404)

    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError):
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{type(exc).__name__}: {exc}",
            exc_info=exc.__cause__ is not None,
        )
        return plain_status(500)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return plain_status(exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"{request.method} {request.url.path}: invalid request: {exc.errors()}")
        return plain_status(400)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, records_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Captured records
    app.include_router(records_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
