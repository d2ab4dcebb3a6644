"""
Schedule data models for the Daily Routine Planner.

This module defines the 'Output' of the scheduling engine:
candidate/committed time slots and the activities placed in them.
"""

import math
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

MINUTES_PER_DAY = 24 * 60
EARTH_RADIUS_KM = 6371.0


def _format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class TimeSlot(BaseModel):
    """
    A block of time of fixed duration, either a candidate or a committed booking.

    `start_minute` lives in the run's normalized minute space: for a window that
    wraps through midnight it keeps increasing past 1439 so ordering stays
    monotonic. The `start` / `end` strings re-wrap to a 24h clock for display.
    """

    start_minute: int = Field(ge=0, description="Start in normalized minutes")
    duration: int = Field(gt=0, description="Length of the slot in minutes")
    occupied: bool = Field(default=False, description="True once committed to a category")
    occupied_by: Optional[str] = Field(default=None, description="Owning category id")

    @property
    def end_minute(self) -> int:
        return self.start_minute + self.duration

    @property
    def start(self) -> str:
        return _format_minutes(self.start_minute % MINUTES_PER_DAY)

    @property
    def end(self) -> str:
        return _format_minutes(self.end_minute % MINUTES_PER_DAY)

    def occupy(self, category_id: str) -> "TimeSlot":
        """Return a committed copy of this slot owned by `category_id`."""
        return self.model_copy(update={"occupied": True, "occupied_by": category_id})


class Coordinates(BaseModel):
    """A WGS84 point."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    def distance_to(self, other: "Coordinates") -> float:
        """Great-circle distance in kilometres (haversine)."""
        d_lat = math.radians(other.lat - self.lat)
        d_lon = math.radians(other.lon - self.lon)
        a = (math.sin(d_lat / 2) ** 2
             + math.cos(math.radians(self.lat)) * math.cos(math.radians(other.lat))
             * math.sin(d_lon / 2) ** 2)
        return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class ScheduledActivity(BaseModel):
    """
    One placed repetition of a category in the daily itinerary.
    The completion flags belong to whoever tracks the day; the scheduler leaves them False.
    """

    # --- What & Where ---
    category_name: str = Field(description="Name of the category this activity belongs to")
    location_id: str = Field(description="ID of the location picked for this repetition")
    address: str = Field(description="Address of the picked location")
    coords: Optional[Coordinates] = Field(default=None, description="Filled in after geocoding")

    # --- When ---
    start_time: str = Field(description="HH:MM")
    end_time: str = Field(description="HH:MM")
    duration: int = Field(gt=0, description="Minutes")
    repetition_index: int = Field(default=0, ge=0, description="Which repetition of the category (0-based)")

    # --- Tracking ---
    is_completed: bool = Field(default=False)
    is_skipped: bool = Field(default=False)

    def mark_completed(self) -> None:
        self.is_completed = True
        self.is_skipped = False

    def mark_skipped(self) -> None:
        self.is_skipped = True
        self.is_completed = False

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "category_name": "Coffee",
            "location_id": "act-2-1",
            "address": "C. 24 Lazaro Cardenas del Río, Centro",
            "start_time": "08:40",
            "end_time": "09:10",
            "duration": 30,
            "repetition_index": 0,
            "coords": {"lat": 31.32, "lon": -113.53},
            "is_completed": False,
            "is_skipped": False
        }
    })
