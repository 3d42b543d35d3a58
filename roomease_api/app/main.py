"""
Main entrypoint for the RoomEase API.

This module assembles the FastAPI application: logging, stores, CORS
and security headers, exception handlers and the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn roomease_api.app.main:app --reload

or with ``python run.py``.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import system
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import AuthError, RoomEaseError
from .core.logging_config import setup_logging
from .stores import Stores, build_stores


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to ``{"error": ...}`` JSON responses."""
    logger = logging.getLogger(__name__)

    @app.exception_handler(RoomEaseError)
    async def roomease_error_handler(request: Request, exc: RoomEaseError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) and exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            content = {"error": "Endpoint not found", "path": request.url.path}
        else:
            content = {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        app_settings: Settings = request.app.state.settings
        message = str(exc) if app_settings.is_development else "Something went wrong"
        # Runs outside the http middleware stack, so the headers are set here.
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": message},
            headers=SECURITY_HEADERS,
        )


def create_app(app_settings: Optional[Settings] = None, stores: Optional[Stores] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use.  Defaults to the module level ``settings``
        read from the environment.
    stores : Optional[Stores]
        Pre‑built stores.  When omitted, stores are built for
        ``app_settings.storage_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before building stores so that store loading
    # is logged.
    setup_logging(app_settings.log_level, app_settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.stores = stores or build_stores(app_settings)
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response

    register_exception_handlers(app)

    app.include_router(system.router, tags=["system"])
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        app_stores: Stores = app.state.stores
        logger.info("%s starting (environment: %s)", app_settings.project_name, app_settings.environment)
        try:
            logger.info("Storage backend: %s, properties: %d", app_stores.backend, app_stores.listings.count())
        except RoomEaseError:
            logger.warning("Could not count properties (store may not be initialised yet)")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("%s shutting down", app_settings.project_name)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
