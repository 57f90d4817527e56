"""Async SQLAlchemy session management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from opengym.config import OpenGymSettings, get_settings
from opengym.db.base import Base
from opengym.logging import logger


class Database:
    """Lazy SQLAlchemy engine/session factory wrapper."""

    def __init__(self, settings: OpenGymSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def _ensure_engine(self) -> None:
        if self._engine is None:
            db_cfg = self.settings.database
            self._engine = create_async_engine(db_cfg.dsn, echo=db_cfg.echo)
            self._session_factory = async_sessionmaker(
                bind=self._engine,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.info("db_engine_initialized", dsn=db_cfg.dsn)

    @property
    def engine(self) -> AsyncEngine:
        self._ensure_engine()
        assert self._engine is not None
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        self._ensure_engine()
        assert self._session_factory is not None
        return self._session_factory

    async def create_all(self) -> None:
        from opengym.db import models  # noqa: F401  registers tables on Base

        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        factory = self.session_factory
        async with factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise


__all__ = ["Database"]
