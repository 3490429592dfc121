import logging

from fastapi import APIRouter, Depends, HTTPException

from event_booking.core.errors import ReferentialIntegrityError, ValidationError
from event_booking.routes.deps import get_store
from event_booking.schemas.books import BookingOut, BookRequest
from event_booking.services.bookings import create_booking
from event_booking.services.store import RecordStore
from event_booking.tasks import audit_booking_task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/book", tags=["bookings"])


@router.post("", response_model=BookingOut)
async def book_event(payload: BookRequest, store: RecordStore = Depends(get_store)):
    try:
        booking = await create_booking(store, payload.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ReferentialIntegrityError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # enqueue background work to re-check the event reference
    try:
        audit_booking_task.delay(booking.id)
    except Exception:
        logger.warning("Could not enqueue audit for booking %s", booking.id, exc_info=True)

    return booking
