"""
Test the shared database handle.
"""
import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.core import config
from event_booking.core.errors import ConfigurationError
from event_booking.database import db


@pytest_asyncio.fixture
async def fresh_handle(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(db, "_connect_lock", asyncio.Lock())
    await db.close_database()
    yield
    await db.close_database()


class TestConnectToDatabase:
    """Test lazy, idempotent connection setup."""

    async def test_missing_url_raises(self, fresh_handle, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "DATABASE_URL", "")
        with pytest.raises(ConfigurationError):
            await db.connect_to_database()

    async def test_concurrent_callers_share_one_handle(self, fresh_handle, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        factories = await asyncio.gather(*(db.connect_to_database() for _ in range(5)))

        assert all(factory is factories[0] for factory in factories)
        assert await db.connect_to_database() is factories[0]

    async def test_close_resets_handle(self, fresh_handle, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        first = await db.connect_to_database()
        await db.close_database()
        second = await db.connect_to_database()

        assert first is not second

    async def test_get_db_yields_session(self, fresh_handle, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        sessions = db.get_db()
        session = await sessions.__anext__()
        try:
            assert isinstance(session, AsyncSession)
        finally:
            await sessions.aclose()
