"""Database engine and session management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from functools import lru_cache
import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from content_service.core.database import Base
from content_service.core.settings import get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Create (once) the async engine for the configured database URL."""
    settings = get_db_settings()
    engine = create_async_engine(settings.url, echo=settings.echo)
    logger.info(
        "Database engine created",
        extra={"dialect": engine.dialect.name},
    )
    return engine


@lru_cache(maxsize=1)
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to :func:`get_engine`."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Framework-agnostic session context manager.

    Use in CLI commands and scripts; FastAPI handlers use
    ``content_service.core.dependencies.database.get_db_session``.

    Example:
        async with get_async_session() as session:
            repo = ContentRepository(session)
            ...
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create every table registered on ``Base.metadata`` if missing."""
    # Models register themselves on import.
    import content_service.features.content.models  # noqa: F401

    target = engine or get_engine()
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def dispose_engine() -> None:
    """Dispose the cached engine, if one was created."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_session_factory.cache_clear()
        get_engine.cache_clear()
