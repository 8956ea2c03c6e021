"""
Date Helpers

Entry timestamps are stored as naive UTC datetimes; the rotation rules
compare calendar dates in UTC.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utc_now().date()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Serialize a naive UTC datetime the way browsers do (``...T12:00:00.000Z``)."""
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds") + "Z"


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime string into a naive UTC datetime.

    A bare date becomes midnight. Offsets (including ``Z``) are converted to
    UTC. Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return start_of_day(value)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
