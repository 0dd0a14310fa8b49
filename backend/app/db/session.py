"""Database engine and session utilities."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import get_settings
from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Configure an async SQLAlchemy engine and session factory."""

    def __init__(self, url: str | None = None):
        self._url = url or get_settings().database_url
        self._engine: AsyncEngine = create_async_engine(self._url, future=True, echo=False)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False, class_=AsyncSession)

    @property
    def url(self) -> str:
        return self._url

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def create_all(self) -> None:
        """Ensure all database tables exist."""

        # Import models so that SQLAlchemy is aware of all tables before create_all runs.
        import app.models  # noqa: F401  # pylint: disable=unused-import

        try:
            async with self._engine.begin() as connection:
                await connection.run_sync(Base.metadata.create_all)
        except SQLAlchemyError:
            logger.exception("Failed to initialise database schema")
            raise

    async def dispose(self) -> None:
        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """Yield an AsyncSession for FastAPI dependency usage."""

        async with self._session_factory() as session:
            yield session


@lru_cache(maxsize=1)
def get_database() -> Database:
    """Return the shared database for the production application."""

    return Database()


__all__ = ["Database", "get_database"]
