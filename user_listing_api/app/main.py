"""
Main entrypoint for the User Listing API.

This module assembles the FastAPI application: it sets up logging,
CORS, the exception handlers that keep every response inside the
standard envelope, and the versioned routers.  Settings are passed in
explicitly; run the app with the factory, e.g.::

    uvicorn user_listing_api.app.main:create_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.result import INTERNAL_ERROR_MESSAGE
from .schemas.envelope import error_response


logger = logging.getLogger(__name__)


def _log_environment(settings: Settings) -> None:
    logger.info(
        "Environment: %s - %s",
        "Docker" if settings.in_container else "Local",
        settings.environment,
    )
    for name in settings.defaulted:
        logger.info("Using local development %s", name)


def register_exception_handlers(app: FastAPI) -> None:
    """Render framework and unexpected errors as envelopes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return error_response(422, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application settings.  When omitted they are read once from the
        environment with ``Settings.from_env``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()

    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)
    _log_environment(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        version = init_db(settings.database_path)
        logger.info("Database ready at %s (schema version %s)", settings.database_path, version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router)
    return app
