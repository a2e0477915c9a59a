"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Shared connection pool
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()


def get_database_url() -> str:
    """Get database URL, checking the environment first so tests can override it late."""
    return os.getenv("PHONEBOOK_DATABASE_URL") or settings.database_url


def to_async_url(db_url: str) -> str:
    """Map a plain database URL to its async driver variant."""
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if db_url.startswith("sqlite://"):
        return db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return db_url


def reset_database() -> None:
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async engine and session factory.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = to_async_url(database_url or get_database_url())

        engine_options: dict = {"echo": settings.sql_echo}
        if db_url.startswith("postgresql"):
            engine_options["pool_size"] = settings.database_pool_size
            engine_options["max_overflow"] = settings.database_max_overflow

        _async_engine = create_async_engine(db_url, **engine_options)
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=db_url)


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


async def dispose_database() -> None:
    """Close pooled connections and forget the engine."""
    if _async_engine is not None:
        await _async_engine.dispose()
    reset_database()


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        elif "unable to open database file" in error_str:
            return False, (
                f"Cannot open SQLite database: {error_str}\n"
                f"Please check that the database directory exists and is writable."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


async def create_tables() -> None:
    """Create all tables that do not exist yet."""
    from ..dbmodels import Base

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", tables=sorted(Base.metadata.tables))


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session (async) from shared pool."""
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Async database not available")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
