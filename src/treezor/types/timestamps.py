"""Date-time scalars bound to a fixed time zone.

Wire format is ``YYYY-MM-DD HH:MM:SS`` with no offset: the zone is implied by
the field. Decoding interprets the text in the bound zone; encoding converts
the stored instant into that zone first, so decode/encode cycles give the
same bytes whatever the host's local zone is.

Absent values: ``""`` and ``0000-00-00 00:00:00``. Values with a negative
year (the upstream sometimes sends ``-0001-11-30 00:00:00``) are also
treated as absent, with a warning, instead of failing the whole response.
That hides genuinely corrupt data, hence the log line.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Any, ClassVar

from treezor.errors.exceptions import ScalarDecodeError
from treezor.types.base import WireScalar
from treezor.types.zones import LONDON, PARIS, UTC

logger = logging.getLogger(__name__)

TIMESTAMP_SENTINEL = "0000-00-00 00:00:00"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


def parse_timestamp(text: str, zone: tzinfo, type_name: str = "Timestamp") -> datetime | None:
    """Parse wire text in ``zone``. Returns None for the absent encodings."""
    if text == "" or text == TIMESTAMP_SENTINEL:
        return None
    if text.startswith("-"):
        logger.warning("Treating negative-year %s %r as absent", type_name, text)
        return None
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ScalarDecodeError(type_name, text, "want YYYY-MM-DD HH:MM:SS")
    try:
        naive = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ScalarDecodeError(type_name, text, str(exc)) from exc
    return normalize(naive, zone, type_name)


def format_timestamp(value: datetime | None, zone: tzinfo, type_name: str = "Timestamp") -> str:
    """Format an instant as seen in ``zone``; None gives the sentinel."""
    if value is None:
        return TIMESTAMP_SENTINEL
    local = normalize(value, zone, type_name)
    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d} "
        f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )


def normalize(value: datetime, zone: tzinfo, type_name: str = "Timestamp") -> datetime:
    """Return ``value`` as an aware datetime in ``zone``, whole seconds.

    Naive values are read as wall time in ``zone``. Going through UTC fixes
    up wall times that fall in a DST gap and sets ``fold`` correctly.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=zone)
    try:
        return value.astimezone(UTC).astimezone(zone).replace(microsecond=0)
    except OverflowError as exc:
        # year 1 wall times shift past datetime.min under LMT offsets
        raise ScalarDecodeError(type_name, str(value), f"outside the representable range in {zone}") from exc


@dataclass(frozen=True)
class Timestamp(WireScalar):
    """Date-time read and written in UTC.

    ``value`` is None when absent. ``original_payload`` keeps the received
    text and does not take part in equality.
    """

    value: datetime | None = None
    original_payload: str = field(default="", compare=False)

    type_name: ClassVar[str] = "Timestamp"
    zone: ClassVar[tzinfo] = UTC
    json_schema: ClassVar[dict[str, Any]] = {"type": "string", "pattern": _TIMESTAMP_RE.pattern}

    def __post_init__(self):
        if self.value is not None:
            object.__setattr__(self, "value", normalize(self.value, self.zone, self.type_name))

    @classmethod
    def from_wire(cls, value: Any) -> "Timestamp":
        if isinstance(value, datetime):
            return cls(value)
        if not isinstance(value, str):
            raise cls.fail(value, f"unexpected JSON {type(value).__name__}, want a date-time string")
        return cls(parse_timestamp(value, cls.zone, cls.type_name), value)

    def to_wire(self) -> str:
        return format_timestamp(self.value, self.zone, self.type_name)

    def __bool__(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return self.to_wire()


def bind_zone(zone: tzinfo, name: str | None = None) -> type[Timestamp]:
    """Build a Timestamp variant that reads and writes in ``zone``."""
    type_name = name or f"Timestamp[{zone}]"
    return type(type_name, (Timestamp,), {"zone": zone, "type_name": type_name, "__module__": __name__})


class TimestampParis(Timestamp):
    """Timestamp bound to Europe/Paris, used by most resource dates."""

    type_name = "TimestampParis"
    zone = PARIS


class TimestampLondon(Timestamp):
    """Timestamp bound to Europe/London, used by card-side dates."""

    type_name = "TimestampLondon"
    zone = LONDON
