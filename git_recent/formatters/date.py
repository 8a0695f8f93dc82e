"""Date and time formatting utilities."""

from datetime import datetime, timezone
from typing import Optional

# (unit, seconds per unit, singular phrase), largest first
_UNITS = [
    ("year", 365 * 86400, "a year"),
    ("month", 30 * 86400, "a month"),
    ("week", 7 * 86400, "a week"),
    ("day", 86400, "a day"),
    ("hour", 3600, "an hour"),
    ("minute", 60, "a minute"),
]

# Anything closer than this reads as "now"
_NOW_THRESHOLD = 10


def _describe(seconds: int) -> str:
    for unit, size, singular in _UNITS:
        count = seconds // size
        if count >= 1:
            return singular if count == 1 else f"{count} {unit}s"
    return f"{seconds} seconds"


def format_relative_time(when: datetime, now: Optional[datetime] = None) -> str:
    """
    Describe how far a timestamp is from now, e.g. "3 hours ago" or "in a day".

    Args:
        when: Timezone-aware datetime
        now: Reference point, defaults to the current time

    Returns:
        Human readable distance
    """
    if now is None:
        now = datetime.now(timezone.utc)
    delta = int((now - when).total_seconds())

    if abs(delta) < _NOW_THRESHOLD:
        return "now"

    text = _describe(abs(delta))
    return f"{text} ago" if delta > 0 else f"in {text}"
