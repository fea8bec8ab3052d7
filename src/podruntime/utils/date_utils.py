import math
from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensures a datetime object is timezone-aware and in UTC.
    If input is naive, it assumes UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def seconds_between(start: datetime, end: datetime) -> int:
    """Whole seconds from start to end, truncated towards negative infinity."""
    return math.floor((ensure_utc(end) - ensure_utc(start)).total_seconds())
