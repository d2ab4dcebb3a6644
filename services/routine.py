"""
Routine generation pipeline: validate -> schedule -> geocode.

This is the caller-side wrapper around the scheduling engine. The engine
happily returns an empty itinerary; this layer is where that becomes an error.
"""

import logging
from typing import List, Optional, Sequence

from models import Category, ScheduledActivity
from scheduler import RoutineScheduler, RandomSource
from .geocoding import Geocoder

logger = logging.getLogger(__name__)


class RoutineGenerationError(Exception):
    """Raised when no routine can be produced from the given categories."""


def filter_valid_categories(categories: Sequence[Category]) -> List[Category]:
    valid = [c for c in categories if c.is_schedulable]
    skipped = len(categories) - len(valid)
    if skipped:
        logger.info(f"Ignoring {skipped} incomplete categories")
    return valid


async def generate_routine(
    categories: Sequence[Category],
    geocoder: Geocoder,
    rng: Optional[RandomSource] = None,
    scheduler: Optional[RoutineScheduler] = None
) -> List[ScheduledActivity]:
    """
    Build a geocoded daily routine.

    Pass `scheduler` to inspect its `state` (failure report, stats) afterwards;
    it must have been built from the already-validated categories.
    """
    valid = filter_valid_categories(categories)
    if not valid:
        raise RoutineGenerationError(
            "Please add at least one category with valid locations and duration to generate a routine."
        )

    scheduler = scheduler or RoutineScheduler(valid, rng=rng)
    activities = scheduler.run()
    if not activities:
        raise RoutineGenerationError(
            "Unable to schedule any activities. Please check your time ranges and durations."
        )

    coordinates = await geocoder.resolve([a.address for a in activities])

    routine = []
    for i, activity in enumerate(activities):
        coords = coordinates[i] if i < len(coordinates) else None
        routine.append(activity.model_copy(update={"coords": coords}))

    located = sum(1 for a in routine if a.coords is not None)
    logger.info(f"Routine ready: {len(routine)} activities, {located} geocoded")
    return routine
