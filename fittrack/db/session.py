"""Async database handle: engine, session factory and request dependency."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fittrack.core.config import Settings
from fittrack.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns one async engine and its session factory.

    Built once at process start (see the app lifespan) and passed to whatever
    needs a unit of work; ``dispose()`` releases the pool at shutdown.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        kwargs: dict = {"echo": echo}
        if url.startswith("sqlite"):
            # One shared connection so an in-memory database survives between sessions
            kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
        else:
            kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.url = url
        self.engine = create_async_engine(url, **kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.async_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.debug,
        )

    async def create_all(self) -> None:
        """Create tables directly (tests and local sqlite; use Alembic in production)."""
        import fittrack.models  # noqa: F401 - register all models

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Unit of work: commit on success, roll back on error."""
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        logger.info("Disposing database engine")
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the process-wide database handle."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async DB session."""
    async with get_database(request).session() as session:
        yield session
