from fastapi import APIRouter, Depends, HTTPException

from event_booking.core.errors import FormatError, StorageConflictError, ValidationError
from event_booking.data.sample_events import SAMPLE_EVENTS
from event_booking.routes.deps import get_store
from event_booking.schemas.books import BookingOut
from event_booking.schemas.events import EventCreate, EventOut, EventUpdate, FeaturedEventOut
from event_booking.services.bookings import list_bookings_for_event
from event_booking.services.events import create_event, get_event_by_slug, list_events, update_event
from event_booking.services.store import RecordStore

router = APIRouter(prefix="/event", tags=["events"])


async def _get_event_or_404(store: RecordStore, slug: str):
    event = await get_event_by_slug(store, slug)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("", response_model=EventOut)
async def new_event(payload: EventCreate, store: RecordStore = Depends(get_store)):
    try:
        return await create_event(store, payload.model_dump())
    except (ValidationError, FormatError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("", response_model=list[EventOut])
async def all_events(store: RecordStore = Depends(get_store)):
    return await list_events(store)


@router.get("/featured", response_model=list[FeaturedEventOut])
async def featured_events():
    return SAMPLE_EVENTS


@router.get("/{slug}", response_model=EventOut)
async def read_event(slug: str, store: RecordStore = Depends(get_store)):
    return await _get_event_or_404(store, slug)


@router.patch("/{slug}", response_model=EventOut)
async def edit_event(slug: str, payload: EventUpdate, store: RecordStore = Depends(get_store)):
    event = await _get_event_or_404(store, slug)
    try:
        return await update_event(store, event, payload.model_dump(exclude_unset=True))
    except (ValidationError, FormatError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{slug}/bookings", response_model=list[BookingOut])
async def event_bookings(slug: str, store: RecordStore = Depends(get_store)):
    event = await _get_event_or_404(store, slug)
    return await list_bookings_for_event(store, event.id)
