"""
Scheduling package for the Daily Routine Planner.
"""

from .engine import RoutineScheduler, schedule_activities
from .distributor import RepetitionDistributor, distribute_repetitions
from .slots import SlotGenerator, generate_available_slots
from .state import PlacementFailure, SchedulerState
from .randomness import FixedSequenceRandom, RandomSource
from .timeutils import add_minutes, is_time_in_range, minutes_to_time, time_to_minutes

__all__ = [
    "RoutineScheduler",
    "schedule_activities",
    "RepetitionDistributor",
    "distribute_repetitions",
    "SlotGenerator",
    "generate_available_slots",
    "PlacementFailure",
    "SchedulerState",
    "FixedSequenceRandom",
    "RandomSource",
    "add_minutes",
    "is_time_in_range",
    "minutes_to_time",
    "time_to_minutes",
]
