"""
Database Configuration

Async SQLAlchemy engine and session management.

The Database handle is created once by the application factory, opened in the
lifespan, stored on app.state and closed at shutdown. Request handlers get a
session through the get_db dependency.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class Database:
    """Owns the async engine and session factory for one process."""

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._engine

    async def connect(self, *, create_tables: bool = False) -> None:
        """
        Create the engine and verify connectivity.

        Args:
            create_tables: Create all tables from model metadata (no migrations)
        """
        self._engine = create_async_engine(self.url, echo=self.echo, pool_pre_ping=True)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if create_tables:
            # Import models so they register on Base.metadata
            from admissions.modules.applications import models as _application_models  # noqa: F401
            from admissions.modules.users import models as _user_models  # noqa: F401

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created from metadata")

        await self.ping()

    async def ping(self) -> bool:
        """Run a trivial query against the database."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session; rolled back if the block raises."""
        if self._session_maker is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        async with self._session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the Database handle of the running app."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
