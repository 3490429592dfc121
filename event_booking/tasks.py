import asyncio

from event_booking.core.celery_config import celery_app
from event_booking.core.config import get_database_url
from event_booking.database.db import create_engine, make_session_factory
from event_booking.services.bookings import audit_booking
from event_booking.services.store import RecordStore


async def _audit_booking(booking_id: int) -> bool:
    # Each task runs in its own event loop; use a dedicated unpooled engine
    engine = create_engine(get_database_url(), use_null_pool=True)
    try:
        async with make_session_factory(engine)() as session:
            return await audit_booking(RecordStore(session), booking_id)
    finally:
        await engine.dispose()


@celery_app.task(bind=True)
def audit_booking_task(self, booking_id: int) -> bool:
    """Re-check after commit that a booking's event still exists."""
    return asyncio.run(_audit_booking(booking_id))
