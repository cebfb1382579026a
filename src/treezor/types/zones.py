"""Fixed time zones used by the upstream API.

Built once at import and never mutated; timestamp codecs receive them as
values rather than looking anything up at decode time.
"""

from datetime import timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from treezor.errors.exceptions import ConfigurationError

UTC = timezone.utc
PARIS = ZoneInfo("Europe/Paris")
LONDON = ZoneInfo("Europe/London")

_KNOWN = {
    "UTC": UTC,
    "Europe/Paris": PARIS,
    "Europe/London": LONDON,
}


def get_zone(name: str):
    """Resolve a zone name, preferring the preloaded constants."""
    if name in _KNOWN:
        return _KNOWN[name]
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"unknown time zone: {name!r}") from exc
