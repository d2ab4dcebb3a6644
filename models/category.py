"""
Category and Location data models for the Daily Routine Planner.
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict

# "HH:MM", 24-hour clock
TIME_PATTERN = r"^\d{2}:\d{2}$"


class Location(BaseModel):
    """A concrete place where a category's activity can happen."""

    id: str = Field(description="Stable identifier for the location")
    address: str = Field(default="", description="Free-form street address")

    @property
    def is_blank(self) -> bool:
        return not self.address.strip()


class TimeRange(BaseModel):
    """
    Allowed time-of-day window.
    A start later than the end means the window wraps through midnight.
    """

    start: str = Field(pattern=TIME_PATTERN, description="Earliest start, HH:MM")
    end: str = Field(pattern=TIME_PATTERN, description="Latest end, HH:MM")


class Category(BaseModel):
    """
    A recurring daily activity type (Gym, Coffee, Lunch...).
    Incomplete categories are accepted so they can be edited incrementally;
    only `is_schedulable` ones should be handed to the scheduler.
    """

    # --- Core Identity ---
    id: str = Field(description="Unique identifier for the category")
    name: str = Field(default="", description="Human-readable name")

    # --- Where ---
    locations: List[Location] = Field(
        default_factory=list,
        description="Candidate locations; one is picked at random per repetition"
    )

    # --- When ---
    activity_duration: int = Field(default=60, description="Duration of one activity in minutes")
    time_range: TimeRange = Field(description="Allowed time-of-day window")
    repetitions: int = Field(default=1, description="How many times per day the activity occurs")
    allow_consecutive: bool = Field(
        default=False,
        description="If False, repetitions are kept at least 90 minutes apart"
    )

    @property
    def is_schedulable(self) -> bool:
        """True when the category has everything the scheduler needs."""
        return (
            bool(self.name.strip())
            and any(not loc.is_blank for loc in self.locations)
            and self.activity_duration > 0
            and self.repetitions > 0
        )

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "cat-2",
            "name": "Coffee",
            "activity_duration": 30,
            "time_range": {"start": "08:00", "end": "18:00"},
            "repetitions": 2,
            "allow_consecutive": False,
            "locations": [
                {"id": "act-2-1", "address": "C. 24 Lazaro Cardenas del Río, Centro"},
                {"id": "act-2-2", "address": "Agustin Melgar y Simon Morua S/N"}
            ]
        }
    })
