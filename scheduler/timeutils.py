"""
Wall-clock arithmetic on "HH:MM" strings.

Times are handled as integer minutes since 00:00. `minutes_to_time` does not
wrap at 24h, so normalize with `% MINUTES_PER_DAY` first when a 00-23 hour is needed.
"""

from models import TimeRange
from models.schedule import MINUTES_PER_DAY


def time_to_minutes(time: str) -> int:
    """Parse "HH:MM" into minutes since midnight. Raises ValueError on malformed input."""
    hours, sep, minutes = time.partition(":")
    if not sep:
        raise ValueError(f"Expected HH:MM, got {time!r}")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def add_minutes(time: str, minutes: int) -> str:
    return minutes_to_time(time_to_minutes(time) + minutes)


def is_time_in_range(time: str, time_range: TimeRange) -> bool:
    """
    Closed-interval containment test.
    Ranges whose start is later than their end wrap through midnight.
    """
    t = time_to_minutes(time)
    start = time_to_minutes(time_range.start)
    end = time_to_minutes(time_range.end)

    if start > end:
        return t >= start or t <= end
    return start <= t <= end
