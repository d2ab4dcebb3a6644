"""
The Daily Routine Scheduling Engine.

This module implements the core "Solver" logic.
It combines three strategies:
1. Priority Ordering (Hardest First) - categories needing more or longer slots claim space first.
2. Slot Discovery - free, buffered slots inside each category's window.
3. Spaced Random Distribution - repetitions spread over the window with randomized tie-breaking.
"""

import logging
from typing import List, Optional

from models import Category, ScheduledActivity
from .distributor import RepetitionDistributor
from .randomness import RandomSource, default_source, pick
from .slots import SlotGenerator
from .state import PlacementFailure, SchedulerState
from .timeutils import time_to_minutes

logger = logging.getLogger(__name__)


class RoutineScheduler:
    """
    Main scheduling engine.
    Ingests Categories, outputs a time-ordered list of ScheduledActivity.

    Categories are expected to be pre-validated (see `Category.is_schedulable`);
    the engine does not re-check them. Inputs are never mutated.
    """

    def __init__(
        self,
        categories: List[Category],
        rng: Optional[RandomSource] = None,
        slot_generator: Optional[SlotGenerator] = None,
        distributor: Optional[RepetitionDistributor] = None
    ):
        self.categories = list(categories)
        self.rng = default_source(rng)

        # Initialize Helpers
        self.slot_generator = slot_generator or SlotGenerator()
        self.distributor = distributor or RepetitionDistributor(rng=self.rng)
        self.state = SchedulerState()

    def run(self) -> List[ScheduledActivity]:
        """
        Execute the scheduling pipeline.
        Never raises for unplaceable categories; returns whatever fits.
        """
        # Fresh occupied set per run
        self.state.clear()

        logger.info(f"Scheduling {len(self.categories)} categories...")

        for category in self._priority_order():
            self.state.register(category)

            if not category.locations:
                continue

            self._place_category(category)

        logger.info(f"Placed {len(self.state.scheduled)} activities, {len(self.state.failures)} failures recorded")
        return sorted(self.state.scheduled, key=lambda a: time_to_minutes(a.start_time))

    def _priority_order(self) -> List[Category]:
        """More repetitions first, then longer activities."""
        return sorted(
            self.categories,
            key=lambda c: (c.repetitions, c.activity_duration),
            reverse=True
        )

    def _place_category(self, category: Category) -> None:
        # 1. Free slots against everything booked so far
        available = self.slot_generator.generate(category, self.state.occupied_slots)

        if not available:
            logger.warning(f"No available slots for category: {category.name}")
            self.state.record_failure(PlacementFailure(
                failure_type="Unplaceable",
                reason=(f"No free {category.activity_duration}-minute slot in "
                        f"{category.time_range.start}-{category.time_range.end}"),
                category_id=category.id
            ))
            return

        # 2. Choose slots for the repetitions
        selected = self.distributor.distribute(available, category.repetitions, category.allow_consecutive)

        # 3. Commit, one random location per repetition
        for repetition_index, slot in enumerate(selected):
            location = pick(self.rng, category.locations)
            activity = ScheduledActivity(
                category_name=category.name,
                location_id=location.id,
                address=location.address,
                start_time=slot.start,
                end_time=slot.end,
                duration=slot.duration,
                repetition_index=repetition_index
            )
            self.state.add_booking(category, slot, activity)

        for missing in range(len(selected), category.repetitions):
            logger.warning(f"Dropped repetition {missing + 1}/{category.repetitions} of {category.name}: spacing unsatisfiable")
            self.state.record_failure(PlacementFailure(
                failure_type="Unsatisfiable",
                reason=f"Only {len(selected)} of {category.repetitions} repetitions fit",
                category_id=category.id,
                repetition_index=missing
            ))


def schedule_activities(categories: List[Category], rng: Optional[RandomSource] = None) -> List[ScheduledActivity]:
    """Run one scheduling pass over `categories` with a fresh state."""
    return RoutineScheduler(categories, rng=rng).run()
