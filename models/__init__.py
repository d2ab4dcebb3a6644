"""
Data models package for the Daily Routine Planner.

This package exports the two pillars of the data architecture:
1. Demand (Category, Location, TimeRange)
2. Output (TimeSlot, ScheduledActivity, Coordinates)
"""

from .category import (
    Category,
    Location,
    TimeRange
)

from .schedule import (
    Coordinates,
    ScheduledActivity,
    TimeSlot
)

__all__ = [
    # --- Demand Models ---
    "Category",
    "Location",
    "TimeRange",

    # --- Output Models ---
    "Coordinates",
    "ScheduledActivity",
    "TimeSlot",
]
