"""
Candidate Slot Discovery.

For a single category, walks its allowed window at a fixed step and returns
every slot of the category's duration that keeps clear of what is already booked.
"""

import logging
from typing import List, Optional

from models import Category, TimeSlot
from .timeutils import MINUTES_PER_DAY, time_to_minutes

logger = logging.getLogger(__name__)


class SlotGenerator:
    """
    Enumerates free slots for a category against the run's occupied set.
    """

    DEFAULT_INTERVAL = 15   # Step between candidate starts (minutes)
    REPEAT_INTERVAL = 10    # Finer step for categories with several repetitions
    BUFFER_MINUTES = 5      # Required breathing room around booked slots

    def __init__(
        self,
        slot_interval: Optional[int] = None,
        repeat_interval: Optional[int] = None,
        buffer_minutes: Optional[int] = None
    ):
        self.slot_interval = slot_interval or self.DEFAULT_INTERVAL
        self.repeat_interval = repeat_interval or self.REPEAT_INTERVAL
        self.buffer_minutes = self.BUFFER_MINUTES if buffer_minutes is None else buffer_minutes

    def generate(self, category: Category, occupied_slots: List[TimeSlot]) -> List[TimeSlot]:
        """
        Returns unoccupied slots in increasing start order (normalized minutes).
        An empty list means the category cannot be placed this run.
        """
        window_start = time_to_minutes(category.time_range.start)
        window_end = time_to_minutes(category.time_range.end)

        # Wrapping window: extend into the next day so the walk stays monotonic
        if window_end <= window_start:
            window_end += MINUTES_PER_DAY

        step = self.slot_interval
        if category.repetitions > 1:
            step = min(self.slot_interval, self.repeat_interval)

        duration = category.activity_duration
        slots = []
        minute = window_start
        while minute + duration <= window_end:
            if not self._conflicts(minute, duration, occupied_slots):
                slots.append(TimeSlot(start_minute=minute, duration=duration))
            minute += step

        logger.debug(f"{category.name}: {len(slots)} free slots in {category.time_range.start}-{category.time_range.end}")
        return slots

    def _conflicts(self, start_minute: int, duration: int, occupied_slots: List[TimeSlot]) -> bool:
        """
        Buffered overlap test in wall-clock day space.
        Booked slots are also checked one day earlier and later so that
        23:50 and 00:05 are seen as neighbours.
        """
        cand_start = start_minute % MINUTES_PER_DAY
        cand_end = cand_start + duration
        buf = self.buffer_minutes

        for occ in occupied_slots:
            occ_start = occ.start_minute % MINUTES_PER_DAY
            occ_end = occ_start + occ.duration
            for shift in (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY):
                if cand_start < occ_end + shift + buf and cand_end > occ_start + shift - buf:
                    return True
        return False


def generate_available_slots(
    category: Category,
    occupied_slots: List[TimeSlot],
    slot_interval: int = SlotGenerator.DEFAULT_INTERVAL
) -> List[TimeSlot]:
    """Functional shortcut around `SlotGenerator.generate`."""
    return SlotGenerator(slot_interval=slot_interval).generate(category, occupied_slots)
