"""
Date and time normalization for event records.

Times are stored as 24-hour ``HH:mm`` and dates as full ISO-8601 UTC
timestamps (``2026-06-10T00:00:00.000Z``).
"""
import re
from datetime import datetime, timezone

from event_booking.core.errors import FormatError

_TIME_24H = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_TIME_12H = re.compile(r"^(1[0-2]|0?[1-9]):([0-5]\d)\s*(am|pm)$", re.IGNORECASE)

# Written forms accepted besides ISO-8601. Month names are matched against a
# fixed English table so parsing does not depend on the process locale.
_NUMERIC_DATE_FORMATS = ("%m/%d/%Y", "%Y/%m/%d")
_MONTH_DAY_YEAR = re.compile(r"^([a-z]+)\.?\s+(\d{1,2}),?\s+(\d{4})$", re.IGNORECASE)
_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})\s+([a-z]+)\.?\s+(\d{4})$", re.IGNORECASE)

_MONTHS = {
    name: number
    for number, names in enumerate(
        (
            ("january", "jan"),
            ("february", "feb"),
            ("march", "mar"),
            ("april", "apr"),
            ("may",),
            ("june", "jun"),
            ("july", "jul"),
            ("august", "aug"),
            ("september", "sep", "sept"),
            ("october", "oct"),
            ("november", "nov"),
            ("december", "dec"),
        ),
        start=1,
    )
    for name in names
}


def normalize_time(value: str) -> str:
    """
    Normalize a time string to ``HH:mm``.

    Accepts ``21:30``/``9:00``, ``9:00 AM``/``12:30pm`` and, as a last
    resort, anything that parses as the time part of an ISO timestamp
    (``09:15:30``). Raises FormatError otherwise.
    """
    trimmed = value.strip()

    match = _TIME_24H.match(trimmed)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    match = _TIME_12H.match(trimmed)
    if match:
        hour = int(match.group(1))
        period = match.group(3).lower()
        if period == "pm" and hour != 12:
            hour += 12
        if period == "am" and hour == 12:
            hour = 0
        return f"{hour:02d}:{match.group(2)}"

    # Attach an arbitrary date and let the ISO parser have a go
    try:
        parsed = datetime.fromisoformat(f"1970-01-01T{trimmed}")
    except ValueError:
        raise FormatError(f"Invalid time format: {value!r}") from None
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def _written_date(month_name: str, day: str, year: str) -> datetime | None:
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return datetime(int(year), month, int(day))
    except ValueError:
        return None


def _parse_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass

    for fmt in _NUMERIC_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    match = _MONTH_DAY_YEAR.match(value)
    if match:
        return _written_date(match.group(1), match.group(2), match.group(3))
    match = _DAY_MONTH_YEAR.match(value)
    if match:
        return _written_date(match.group(2), match.group(1), match.group(3))
    return None


def normalize_date(value: str) -> str:
    """Normalize a date string to an ISO-8601 UTC timestamp. Raises FormatError on invalid input."""
    parsed = _parse_date(value.strip())
    if parsed is None:
        raise FormatError(f"Invalid date format: {value!r}")

    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            # Offsets at the edges of the calendar can fall outside datetime's range
            parsed = parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        raise FormatError(f"Invalid date format: {value!r}") from None
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")
