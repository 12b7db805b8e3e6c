"""
Subscriptions API — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds (or accepts) the database engine, injects it on
       app.state, registers middleware, exception handlers and routes.
Who:   uvicorn (`subscriptions_api.main:app`), the `python -m
       subscriptions_api` entry point, and the test suite.

Application Layout:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware:  [Request ID] → [Access Logging]           │
    │                                                         │
    │  Routes:                                                │
    │    GET /                    GET /health-check           │
    │    POST /subscription       GET /get-subscriptions      │
    │    DELETE /delete-subscriptions/{email}                 │
    │                                                         │
    │  Exception Handlers (all bodies empty):                 │
    │    ValidationError→400  DatabaseError→500  other→500    │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, verify the database is reachable
              (failure aborts startup)
    Shutdown: dispose the engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException

from subscriptions_api import __version__
from subscriptions_api.config import settings
from subscriptions_api.database import (
    build_engine,
    build_session_factory,
    dispose_engine,
    verify_connection,
)
from subscriptions_api.exceptions import DatabaseError, ValidationError
from subscriptions_api.middleware.logging import RequestLoggingMiddleware
from subscriptions_api.middleware.request_id import RequestIDMiddleware, request_id_var
from subscriptions_api.routes import greeting, health, subscriptions

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Open one connection through the injected engine; if the database
           is unreachable the error propagates and the server does not start
    Shutdown:
        1. Dispose the engine
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Subscriptions API %s starting up...", __version__)

    engine: AsyncEngine = app.state.engine
    try:
        await verify_connection(engine)
    except Exception as e:
        logger.error("Failed to connect to the database: %s", e)
        await dispose_engine(engine)
        raise

    logger.info(
        "Server ready at http://%s:%d",
        settings.application_host,
        settings.application_port,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Subscriptions API shutting down...")
    await dispose_engine(engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes.

    Every failure response has an EMPTY body. Messages and context are
    written to the server log only.

        ValidationError        → 400
        DatabaseError          → 500
        HTTPException          → its own status (404, 405, ...)
        Exception (fallback)   → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return Response(status_code=400)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return Response(status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return Response(status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, exc, exc_info=True)
        return Response(status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        engine: Connection pool to serve requests from. Built from
                `settings` when omitted; tests pass their own.

    Returns:
        FastAPI instance with engine and session factory on app.state.
    """
    app = FastAPI(
        title="Subscriptions API",
        description="Create, list and delete newsletter subscriptions.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Inject the Connection Pool ────────────────────────────────────────
    if engine is None:
        engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greeting.router)
    app.include_router(health.router)
    app.include_router(subscriptions.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `subscriptions_api.main:app` to be importable
app = create_app()
