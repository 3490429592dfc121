from unittest.mock import Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from event_booking.database.db import create_all, get_db, make_session_factory
from event_booking.main import app
from event_booking.services.store import RecordStore

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """A fresh database per test."""
    engine: AsyncEngine = create_async_engine(SQLALCHEMY_DATABASE_URL, poolclass=StaticPool)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine: AsyncEngine):
    session: AsyncSession = make_session_factory(engine)()
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
def store(db_session: AsyncSession) -> RecordStore:
    return RecordStore(db_session)


@pytest_asyncio.fixture
async def client(engine: AsyncEngine):
    TestingSessionLocal = make_session_factory(engine)

    # Override the database dependency
    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# Keep the booking route from publishing to a real broker
@pytest.fixture(autouse=True)
def audit_task(monkeypatch: pytest.MonkeyPatch) -> Mock:
    task = Mock()
    monkeypatch.setattr("event_booking.routes.bookings.audit_booking_task", task)
    return task


@pytest.fixture
def event_attrs() -> dict:
    return {
        "title": "PyCon US 2026",
        "description": "The largest annual gathering for the community using and developing Python.",
        "overview": "Tutorials, talks, an expo hall and development sprints.",
        "image": "/images/event4.png",
        "venue": "Salt Palace Convention Center",
        "location": "Salt Lake City, USA",
        "date": "2026-04-15",
        "time": "10:00 AM",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Tutorials", "Talks", "Sprints"],
        "organizer": "Python Software Foundation",
        "tags": ["python", "community"],
    }
