import logging
import re
from typing import Any

from event_booking.core.errors import ReferentialIntegrityError, ValidationError
from event_booking.models.books import Booking
from event_booking.services.build import BuildResult, build
from event_booking.services.store import RecordStore

logger = logging.getLogger(__name__)

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def prepare_booking(attrs: dict[str, Any]) -> dict[str, Any]:
    """Validate booking attributes and normalize the email. Raises ValidationError."""
    event_id = attrs.get("event_id")
    if event_id is None:
        raise ValidationError("event_id", "event_id is required")

    email = attrs.get("email")
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("email", "Email is required")
    email = email.strip().lower()
    if not EMAIL_REGEX.match(email):
        raise ValidationError("email", "Invalid email format")

    return {"event_id": event_id, "email": email}


def build_booking(attrs: dict[str, Any]) -> BuildResult:
    return build(prepare_booking, attrs)


async def create_booking(store: RecordStore, attrs: dict[str, Any]) -> Booking:
    """
    Validate and persist a booking.

    The referenced event is looked up right before the insert. This is a
    read-then-write check, not a transaction: an event deleted between the
    two statements leaves an orphaned booking (see ``audit_booking``).
    """
    record = build_booking(attrs).unwrap()

    if not await store.exists("events", {"id": record["event_id"]}):
        logger.info("Rejected booking for missing event %s", record["event_id"])
        raise ReferentialIntegrityError("Referenced event does not exist")

    booking = await store.create("bookings", record)
    logger.info("Created booking %s for event %s", booking.id, booking.event_id)
    return booking


async def list_bookings_for_event(store: RecordStore, event_id: int) -> list[Booking]:
    return await store.find("bookings", {"event_id": event_id}, order_by=Booking.id)


async def audit_booking(store: RecordStore, booking_id: int) -> bool:
    """Check that a stored booking still points at an existing event. Returns False for orphans."""
    booking = await store.get("bookings", {"id": booking_id})
    if booking is None:
        logger.info("Booking %s no longer exists, nothing to audit", booking_id)
        return False

    if not await store.exists("events", {"id": booking.event_id}):
        logger.warning("Booking %s references missing event %s", booking.id, booking.event_id)
        return False
    return True
