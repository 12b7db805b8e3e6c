"""
Subscriptions API — Database Engine & Session Management
==========================================================

What:  Async SQLAlchemy engine construction, the declarative base, and the
       per-request session dependency.
How:   The application factory builds one engine (the connection pool) and
       stores it, with its session factory, on `app.state`. Route handlers
       receive a session through `get_db_session`, which looks the factory
       up on the request's application. Nothing here is module-global, so
       tests can hand the factory an engine of their own.
Who:   main.create_app() (construction, lifecycle) and route handlers
       (via FastAPI's Depends()).

Session Lifecycle:
    One session per request. A session checks a connection out of the
    pool when its first statement runs and returns it when the session
    closes at the end of the request. Services commit their own single
    statement; this dependency only rolls back and closes.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from subscriptions_api.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine (and its connection pool) from settings.

    The engine does not connect here; the first connection is opened by
    `verify_connection` at startup or by the first request.
    """
    return create_async_engine(
        settings.connection_string,
        # Echo SQL queries in DEBUG mode for development visibility
        echo=settings.log_level == "DEBUG",
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: rows stay readable after the service commits
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """
    Open one pooled connection and run SELECT 1.

    Raises whatever the driver raises when the database is unreachable;
    the lifespan lets it propagate so the server refuses to start.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections. Called from the lifespan on shutdown."""
    await engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes the session factory injected on app.state
        2. Yields a new session to the route handler
        3. On error: rolls back anything the handler left uncommitted
        4. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/get-subscriptions")
        async def list_subscriptions(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise  # Re-raise so the global error handler can respond
        finally:
            await session.close()
