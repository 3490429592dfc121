"""Exceptions raised while validating and persisting events and bookings."""


class EventBookingError(Exception):
    """Base exception for the event booking service."""


class ConfigurationError(EventBookingError):
    """Required configuration is missing."""


class ValidationError(EventBookingError):
    """A field is missing, empty or fails its format predicate."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class FormatError(EventBookingError):
    """A date or time string matches none of the recognised grammars."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ReferentialIntegrityError(EventBookingError):
    """A booking references an event that does not exist."""


class StorageConflictError(EventBookingError):
    """A unique index was violated on write (duplicate slug)."""
