"""Calendar date with the ``0000-00-00`` "no date" sentinel."""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar

from treezor.types.base import WireScalar

DATE_SENTINEL = "0000-00-00"
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class Date(WireScalar):
    """A date without time of day.

    ``value`` is None for the sentinel. ``original_payload`` keeps the text
    as received for diagnostics and does not take part in equality.
    """

    value: date | None = None
    original_payload: str = field(default="", compare=False)

    type_name: ClassVar[str] = "Date"
    json_schema: ClassVar[dict[str, Any]] = {"type": "string", "format": "date"}

    @classmethod
    def of(cls, moment: date | datetime) -> "Date":
        """Keep only the calendar day of ``moment``, as seen in its own zone."""
        return cls(date(moment.year, moment.month, moment.day))

    @classmethod
    def from_wire(cls, value: Any) -> "Date":
        if isinstance(value, datetime):
            return cls.of(value)
        if isinstance(value, date):
            return cls(value)
        if not isinstance(value, str):
            raise cls.fail(value, f"unexpected JSON {type(value).__name__}, want a YYYY-MM-DD string")
        if value == DATE_SENTINEL:
            return cls(None, value)
        if not _DATE_RE.fullmatch(value):
            raise cls.fail(value, "want YYYY-MM-DD")
        try:
            parsed = datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as exc:
            raise cls.fail(value, str(exc)) from exc
        return cls(parsed, value)

    def to_wire(self) -> str:
        if self.value is None:
            return DATE_SENTINEL
        return f"{self.value.year:04d}-{self.value.month:02d}-{self.value.day:02d}"

    def __bool__(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return self.to_wire()
