"""
Doubler API - FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) returns a configured FastAPI instance. The Settings
       object is passed in explicitly and kept on app.state.settings.
Who:   uvicorn (`uvicorn doubler.main:app`), the CLI and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│  Logging    │→│  GZip            │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌─────────────┐           │
    │  │ POST /doubler/{p1}   │ │ GET /health │           │
    │  └──────────────────────┘ └─────────────┘           │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ GET /docs  │  GET /docs/openapi.json         │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ InvalidArgument→400 │ Validation→400 │ *→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from doubler.config import Settings, get_settings
from doubler.exceptions import DoublerError, InvalidArgumentError
from doubler.middleware.logging import RequestLoggingMiddleware
from doubler.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDLogFilter,
    RequestIDMiddleware,
    request_id_var,
)
from doubler.routes import doubler as doubler_routes
from doubler.routes import health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Our access logger already covers every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging and announce the docs URL. Shutdown: log it."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info("%s %s starting up...", settings.api_title, settings.api_version)
    logger.info(settings.docs_url)

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Optional[dict] = None) -> dict:
    return {
        "error": error,
        "message": message,
        "details": details,
        "request_id": request_id_var.get(""),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        InvalidArgumentError    → 400 Bad Request
        RequestValidationError  → 400 Bad Request (same "invalid_argument" code)
        DoublerError (base)     → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Error bodies never include value1/value2 or stack traces.
    """

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(request: Request, exc: InvalidArgumentError):
        """The operation rejected its input."""
        logger.warning("Invalid argument: %s %s", exc.message, exc.context)
        return JSONResponse(
            status_code=400,
            content=_error_body("invalid_argument", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """
        Request decoding or schema validation failed (wrong types, malformed
        JSON, odd param1). Reported with the same error kind as the service's
        own check so clients see a single "invalid argument" condition.
        """
        errors = jsonable_encoder(exc.errors())
        logger.warning("Request validation failed: %s", errors)
        return JSONResponse(
            status_code=400,
            content=_error_body("invalid_argument", "invalid argument", {"errors": errors}),
        )

    @app.exception_handler(DoublerError)
    async def handle_doubler_error(request: Request, exc: DoublerError):
        """Application error without a more specific mapping."""
        logger.error("Application error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all; the traceback is logged server-side only.

        Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        X-Request-ID header is set here.
        """
        logger.error(
            "Unexpected error: %s",
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
            headers={REQUEST_ID_HEADER: request_id_var.get("")},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration for this instance. Defaults to the settings
                  read from the environment.

    Returns:
        Fully configured FastAPI instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/docs/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → routes
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(doubler_routes.create_router(deprecated=settings.doubler_deprecated))
    app.include_router(health.router)

    return app


# uvicorn expects `doubler.main:app` to be importable
app = create_app()
