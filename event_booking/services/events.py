"""
Event validation and persistence.

``prepare_event`` is the explicit validate-and-normalize step run before any
write: it checks every declared field, derives the slug when the title
changes and canonicalizes date/time when they change. ``create_event`` and
``update_event`` call it and then hand the result to the record store.
"""
import logging
from typing import Any

from event_booking.core.errors import FormatError, ValidationError
from event_booking.models.events import Event
from event_booking.services.build import BuildResult, build
from event_booking.services.slugs import slugify
from event_booking.services.store import RecordStore
from event_booking.services.temporal import normalize_date, normalize_time

logger = logging.getLogger(__name__)

STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = STRING_FIELDS + LIST_FIELDS

# Stored exactly as submitted; only checked for emptiness
_UNTRIMMED_FIELDS = {"description"}

_NORMALIZERS = {
    "date": normalize_date,
    "time": normalize_time,
}


def _clean_string(field: str, value: Any) -> str:
    if value is None:
        raise ValidationError(field, f"{field} is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    if not value.strip():
        raise ValidationError(field, f"{field} cannot be empty")
    return value if field in _UNTRIMMED_FIELDS else value.strip()


def _clean_list(field: str, value: Any) -> list[str]:
    if value is None:
        raise ValidationError(field, f"{field} is required")
    if not isinstance(value, (list, tuple)):
        raise ValidationError(field, f"{field} must be a list of strings")
    if not value:
        raise ValidationError(field, f"{field} must contain at least one item")
    if not all(isinstance(item, str) for item in value):
        raise ValidationError(field, f"{field} must be a list of strings")
    return [item.strip() for item in value]


def prepare_event(attrs: dict[str, Any], current: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Validate and normalize event attributes.

    With ``current`` (the stored record) the call is an update: ``attrs``
    holds only the submitted changes, and slug/date/time are recomputed only
    for fields whose value actually differs from ``current``.

    Raises ValidationError or FormatError naming the offending field.
    """
    if current is None:
        changed = set(EVENT_FIELDS)
        merged = {field: attrs.get(field) for field in EVENT_FIELDS}
    else:
        changed = {field for field in EVENT_FIELDS if field in attrs and attrs[field] != current.get(field)}
        merged = {field: attrs[field] if field in changed else current.get(field) for field in EVENT_FIELDS}

    record: dict[str, Any] = {}
    for field in STRING_FIELDS:
        record[field] = _clean_string(field, merged[field])
    for field in LIST_FIELDS:
        record[field] = _clean_list(field, merged[field])

    if "title" in changed:
        slug = slugify(record["title"])
        if not slug:
            raise ValidationError("title", "title must contain at least one letter or digit")
        record["slug"] = slug
    else:
        record["slug"] = current["slug"]  # type: ignore[index]

    for field, normalize in _NORMALIZERS.items():
        if field not in changed:
            continue
        try:
            record[field] = normalize(record[field])
        except FormatError as e:
            e.field = field
            raise

    return record


def build_event(attrs: dict[str, Any]) -> BuildResult:
    """Builder for new events; rejections come back in the result instead of being raised."""
    return build(prepare_event, attrs)


def event_fields(event: Event) -> dict[str, Any]:
    return {field: getattr(event, field) for field in (*EVENT_FIELDS, "slug")}


async def create_event(store: RecordStore, attrs: dict[str, Any]) -> Event:
    record = build_event(attrs).unwrap()
    event = await store.create("events", record)
    logger.info("Created event %s with slug %r", event.id, event.slug)
    return event


async def update_event(store: RecordStore, event: Event, changes: dict[str, Any]) -> Event:
    record = prepare_event(changes, current=event_fields(event))
    updates = {key: value for key, value in record.items() if getattr(event, key) != value}
    if not updates:
        return event

    event = await store.update(event, updates)
    logger.info("Updated event %s (%s)", event.id, ", ".join(sorted(updates)))
    return event


async def get_event_by_slug(store: RecordStore, slug: str) -> Event | None:
    return await store.get("events", {"slug": slug})


async def list_events(store: RecordStore) -> list[Event]:
    """Return all events, newest first."""
    return await store.find("events", order_by=Event.id.desc())
