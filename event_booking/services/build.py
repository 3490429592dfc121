from dataclasses import dataclass
from typing import Any

from event_booking.core.errors import FormatError, ValidationError


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a record builder: the normalized attributes or the error that rejected them."""

    record: dict[str, Any] | None = None
    error: ValidationError | FormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> dict[str, Any]:
        if self.error is not None:
            raise self.error
        return self.record  # type: ignore[return-value]


def build(prepare, attrs: dict[str, Any]) -> BuildResult:
    try:
        return BuildResult(record=prepare(attrs))
    except (ValidationError, FormatError) as e:
        return BuildResult(error=e)
