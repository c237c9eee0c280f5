"""
AlgoTest Backend - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() serves the module-level `app` with uvicorn.
Who:   Started with `algotest`, `python -m algotest` or `uvicorn algotest.main:app`.

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                     FastAPI App                         │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────┐ ┌──────────┐ ┌──────────────┐ ┌────────┐  │
    │  │  Req ID  │→│ Logging  │→│ Sec. Headers │→│  CORS  │  │
    │  └──────────┘ └──────────┘ └──────────────┘ └────────┘  │
    │                                                         │
    │  Routes:                                                │
    │  GET /health   GET /api/test   GET /api/algorithms      │
    │  POST /api/run-algorithm                                │
    │                                                         │
    │  Exception Handlers:                                    │
    │  Validation→400 │ UnknownAlgorithm→400 │ NotFound→404   │
    │  anything else→500                                      │
    └─────────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from algotest import __version__
from algotest.config import settings
from algotest.exceptions import (
    RouteNotFoundError,
    UnknownAlgorithmError,
    ValidationError,
)
from algotest.middleware.logging import RequestLoggingMiddleware
from algotest.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from algotest.middleware.security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware
from algotest.routes import algorithms, health, info

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] algotest.access: GET /api/test 200 0.4ms ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    base_url = f"http://localhost:{settings.port}"
    logger.info("%s %s starting (%s)", settings.service_name, __version__, settings.environment)
    logger.info("Server running on %s:%d", settings.host, settings.port)
    logger.info("Health check: %s/health", base_url)
    logger.info("API docs: %s/api/test (OpenAPI UI at %s/docs)", base_url, base_url)

    yield

    logger.info("%s shutting down", settings.service_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _original_url(request: Request) -> str:
    """Path plus query string, as the client requested it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and JSON bodies.

    Handler hierarchy:
        ValidationError          → 400 {error, details, request_id}
        UnknownAlgorithmError    → 400 {error, details, request_id}
        RequestValidationError   → 400 (unparsable or non-object JSON body)
        RouteNotFoundError       → 404 {error, path, request_id}
        HTTPException 404/405    → 404 via RouteNotFoundError
        Exception (fallback)     → 500 {error, message, request_id}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(UnknownAlgorithmError)
    async def handle_unknown_algorithm(request: Request, exc: UnknownAlgorithmError):
        rid = request_id_var.get("")
        logger.warning("[%s] Unknown algorithm ID: %r", rid, exc.algorithm_id)
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        # Body was not a JSON object; report it like any other malformed request
        errors = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return await handle_validation_error(
            request,
            ValidationError(
                "Request body must be a JSON object with algorithmId and input",
                context={"errors": errors},
            ),
        )

    @app.exception_handler(RouteNotFoundError)
    async def handle_route_not_found(request: Request, exc: RouteNotFoundError):
        return JSONResponse(
            status_code=404,
            content={
                "error": exc.message,
                "path": exc.path,
                "request_id": request_id_var.get(""),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Unmatched method and unmatched path are both "no such route"
        if exc.status_code in (404, 405):
            return await handle_route_not_found(
                request, RouteNotFoundError(_original_url(request))
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "request_id": request_id_var.get("")},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        The stack trace is always logged; the exception message is only
        returned to the client in development mode. This handler runs in
        ServerErrorMiddleware, outside the user middleware stack, so it sets
        the request ID and security headers itself.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Something went wrong!",
                "message": str(exc) if settings.is_development else "Internal server error",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid, **SECURITY_HEADERS},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="AlgoTest API",
        description=(
            "Runs textbook algorithms (bubble sort, quick sort, binary search and a "
            "shortest-path stub) on JSON input and reports the result with timing."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → SecurityHeaders → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(info.router)
    app.include_router(algorithms.router)

    return app


app = create_app()


def run() -> None:
    """Console-script entry point: serve `app` on the configured host and port."""
    uvicorn.run(
        "algotest.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
