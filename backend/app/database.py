"""
Anythink Market Backend — Database Session Management
======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `Database` owns one async engine with its connection pool and hands out
       sessions. The app factory creates it and stores it on `app.state`;
       the `get_db_session` dependency reads it back from the request.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created by create_app(); sessions are created per-request.

There is no module-level engine. Whoever builds the app decides which
database it talks to (PostgreSQL via asyncpg in production, SQLite via
aiosqlite in tests).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from app.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Errors raised by SQLAlchemy or straight from the driver socket (e.g. connection refused)
STORAGE_ERRORS = (SQLAlchemyError, OSError)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic and `create_all()` read.
    """
    pass


def build_engine(app_settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database URL.

    PostgreSQL gets a sized connection pool. SQLite runs on one shared
    connection (StaticPool), otherwise every session would see its own
    empty in-memory database.
    """
    if app_settings.is_sqlite:
        return create_async_engine(
            app_settings.database_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=app_settings.log_level == "DEBUG",
        )

    return create_async_engine(
        app_settings.database_url,
        pool_size=app_settings.db_pool_size,
        max_overflow=app_settings.db_max_overflow,
        pool_pre_ping=app_settings.db_pool_pre_ping,
        pool_recycle=3600,  # Recycle after 1 hour
        echo=app_settings.log_level == "DEBUG",
    )


class Database:
    """
    Storage engine client: one engine plus the session factory bound to it.

    Usage:
        database = Database(Settings(database_url="sqlite+aiosqlite://"))
        await database.create_all()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        self.settings = app_settings or default_settings
        self.engine = engine or build_engine(self.settings)
        # expire_on_commit=False: returned ORM objects stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open one session and roll it back if the caller raises.

        Commits are issued by the service layer, one per operation, so the
        HTTP response is only produced after the write is durable. A rollback
        that fails on a dead connection is logged and the original exception
        is the one that propagates.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                try:
                    await session.rollback()
                except STORAGE_ERRORS as e:
                    logger.warning("Session rollback failed: %s", str(e))
                raise

    async def ping(self) -> None:
        """Run `SELECT 1`; raises whatever the driver raises when unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create missing tables from the ORM metadata."""
        # Registers Comment with Base.metadata before create_all runs
        from app.models import comment  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection. Called on application shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The Database instance comes from `request.app.state.database`, set by
    create_app(). FastAPI throws a handler's exception back in at the
    `yield`, so `Database.session` rolls the session back before the global
    error handlers build the response.

    Example usage in a route:
        @router.get("/comments")
        async def list_comments(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
