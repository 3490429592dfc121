"""Process-wide database handle.

The engine and session factory are created lazily by the first caller of
:func:`connect_to_database` and reused for the life of the process.
Concurrent callers wait on the same lock and receive the same handle.
"""

import asyncio
import logging
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from event_booking.core.config import get_database_url

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_connect_lock = asyncio.Lock()


def create_engine(url: str, *, use_null_pool: bool = False, echo: bool = False) -> AsyncEngine:
    """Create an async engine for *url*.

    ``use_null_pool`` disables pooling, for short-lived callers that run
    their own event loop (Celery tasks, scripts).
    """
    kwargs: dict = {"echo": echo}
    if use_null_pool:
        kwargs["poolclass"] = NullPool
    return create_async_engine(url, **kwargs)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    # Import models so that they register with Base.metadata
    from event_booking.models import books, events  # noqa: F401

    # Create all tables (in production, use migrations such as Alembic)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def connect_to_database() -> async_sessionmaker[AsyncSession]:
    """Return the shared session factory, creating it on first use."""
    global _engine, _session_factory

    if _session_factory is not None:
        return _session_factory

    async with _connect_lock:
        if _session_factory is None:
            url = get_database_url()
            engine = create_engine(url)
            await create_all(engine)
            _engine = engine
            _session_factory = make_session_factory(engine)
            logger.info("Connected to database %s", url.split("@")[-1])

    return _session_factory


async def close_database() -> None:
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


async def get_db() -> AsyncIterator[AsyncSession]:
    session_factory = await connect_to_database()
    async with session_factory() as session:
        yield session
