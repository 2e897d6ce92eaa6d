"""
Admissions API - Main Application Entry Point

This module builds and configures the FastAPI application including:
- Database connection (opened at startup, closed at shutdown)
- CORS middleware
- API routing
- Response-envelope exception handlers
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admissions.api import api_router
from admissions.core.config import Settings, get_settings
from admissions.core.database import Database
from admissions.core.exceptions import ServiceError
from admissions.core.logging import configure_logging
from admissions.core.responses import (
    error_response,
    internal_error_response,
    service_error_response,
    success_response,
)

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    """Render every error, including framework ones, in the response envelope."""

    @app.exception_handler(ServiceError)
    async def handle_service_error(_request: Request, exc: ServiceError) -> JSONResponse:
        return service_error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_response(message, exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            f'"{".".join(str(part) for part in error["loc"])}": {error["msg"]}'
            for error in exc.errors()
        ]
        return error_response("Validation error", status.HTTP_400_BAD_REQUEST, errors)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return internal_error_response()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
    """
    settings = settings or get_settings()
    database = Database(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Opens the database on startup and disposes of it on shutdown.
        """
        configure_logging(settings.log_level)
        logger.info(f"Starting {settings.app_name} in {settings.python_env} mode...")

        try:
            await database.connect(create_tables=settings.database_auto_create)
            logger.info("[OK] Database connected")
        except Exception as e:
            logger.error(f"[FAIL] Database connection failed: {e}")
            if settings.is_production:
                raise

        yield  # Application runs here

        logger.info(f"Shutting down {settings.app_name}...")
        await database.close()
        logger.info("[OK] Cleanup complete")

    app = FastAPI(
        title=settings.app_name,
        description="University application intake API",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.include_router(api_router, prefix="/api/v1")

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    async def root() -> JSONResponse:
        """Root endpoint - API welcome message."""
        return success_response(
            {"service": settings.app_name, "environment": settings.python_env},
            message="Admissions API running",
        )

    @app.get("/health", tags=["Health"])
    async def health_check() -> JSONResponse:
        """Health check endpoint for container orchestration."""
        return success_response({"status": "healthy"})

    @app.get("/ready", tags=["Health"])
    async def readiness_check() -> JSONResponse:
        """Readiness check endpoint: the database must answer."""
        try:
            await database.ping()
        except Exception as e:
            logger.warning(f"Readiness check failed: {e}")
            return error_response("Database unavailable", status.HTTP_503_SERVICE_UNAVAILABLE)
        return success_response({"status": "ready"})

    return app


app = create_app()
