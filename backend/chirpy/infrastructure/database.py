"""Database — async engine, per-request session scope and readiness ping.

Invariants:
    - A session that sees an exception is rolled back, then closed, and the
      exception propagates unchanged
    - SQLAlchemyError is translated to DatabaseError in the repositories,
      which know which operation failed; this module never translates
    - ping() answers True or False and never raises

Design Decisions:
    - One Database per process, created in the FastAPI lifespan (init_db)
      and held in active_db so get_db and /api/readyz find it
    - expire_on_commit=False: returned rows stay readable after commit
    - pool_pre_ping plus hourly recycle: dropped connections are replaced
      before a request sees them
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

logger = logging.getLogger(__name__)

POOL_RECYCLE_SECONDS = 3600


class Database:
    """Engine plus session factory for the chirpy schema."""

    def __init__(
        self, engine: AsyncEngine,
        sessions: async_sessionmaker[AsyncSession] | None = None,
    ):
        self.engine = engine
        self.sessions = sessions or async_sessionmaker(
            engine, expire_on_commit=False,
        )

    @classmethod
    def connect(
        cls, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ) -> "Database":
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=POOL_RECYCLE_SECONDS,
        )
        return cls(engine)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.sessions() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        """Run SELECT 1; False when the database cannot be reached."""
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


active_db: Database | None = None


def init_db(database_url: str, **pool_options) -> Database:
    global active_db
    active_db = Database.connect(database_url, **pool_options)
    return active_db


async def close_db() -> None:
    global active_db
    if active_db is not None:
        await active_db.dispose()
        active_db = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if active_db is None:
        raise RuntimeError("Database not initialized")
    async with active_db.session() as session:
        yield session
