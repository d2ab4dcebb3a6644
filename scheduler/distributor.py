"""
Repetition Distribution.

Given the free slots of one category, chooses which of them host its repetitions.
The goal is a day that feels spread out but still random:
1. First repetition biased towards early availability.
2. Following repetitions aimed at an 'ideal gap' that spaces them over the window.
3. Fallbacks so a tight window degrades to fewer/closer repetitions instead of failing.
"""

import logging
import math
from typing import List, Optional

from models import TimeSlot
from .randomness import RandomSource, default_source, pick

logger = logging.getLogger(__name__)


class RepetitionDistributor:
    """
    Selects non-overlapping slots for a category's repetitions.
    The fractions below are empirical spacing biases, not hard rules.
    """

    MIN_GAP_MINUTES = 90            # Spacing between repetitions unless consecutive is allowed
    FIRST_PICK_DIVISOR = 3          # First pick comes from the first 1/3 of slots
    BEST_CANDIDATE_FRACTION = 0.3   # Random pick among the best 30% by gap score

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        min_gap_minutes: Optional[int] = None,
        first_pick_divisor: Optional[int] = None,
        best_candidate_fraction: Optional[float] = None
    ):
        self.rng = default_source(rng)
        self.min_gap_minutes = self.MIN_GAP_MINUTES if min_gap_minutes is None else min_gap_minutes
        self.first_pick_divisor = first_pick_divisor or self.FIRST_PICK_DIVISOR
        self.best_candidate_fraction = best_candidate_fraction or self.BEST_CANDIDATE_FRACTION

    def distribute(
        self,
        available_slots: List[TimeSlot],
        repetitions: int,
        allow_consecutive: bool = False
    ) -> List[TimeSlot]:
        """
        Returns the chosen slots in selection order (not necessarily time order).
        May return fewer than `repetitions` slots when spacing cannot be satisfied.
        """
        if repetitions <= 0 or not available_slots:
            return []

        if repetitions == 1:
            return [pick(self.rng, available_slots)]

        min_gap = 0 if allow_consecutive else self.min_gap_minutes
        total_span = available_slots[-1].start_minute - available_slots[0].start_minute
        ideal_gap = max(min_gap, total_span // repetitions)

        # 1. Anchor: somewhere in the first third of availability
        first_third = len(available_slots) // self.first_pick_divisor
        selected = [available_slots[self.rng.randrange(max(1, first_third))]]

        # 2. Each following repetition chases the ideal gap after the previous pick
        for i in range(1, repetitions):
            previous_end = selected[-1].end_minute

            candidates = [
                slot for slot in available_slots
                if slot.start_minute - previous_end >= min_gap
                and not self._overlaps_any(slot, selected, min_gap)
            ]

            if candidates:
                ranked = sorted(candidates, key=lambda s: abs((s.start_minute - previous_end) - ideal_gap))
                keep = max(1, math.floor(len(ranked) * self.best_candidate_fraction))
                selected.append(pick(self.rng, ranked[:keep]))
                continue

            # 3. Fallbacks
            fallback = self._fallback(available_slots, selected, min_gap)
            if fallback is not None:
                selected.append(fallback)
            else:
                logger.debug(f"Dropping repetition {i}: no slot left that clears {len(selected)} picks")

        return selected

    def _fallback(self, available_slots: List[TimeSlot], selected: List[TimeSlot], min_gap: int) -> Optional[TimeSlot]:
        """
        First stage: any slot that still keeps `min_gap` from every pick (earlier
        ones included). This goes beyond a plain non-overlap fallback so that
        spacing survives when the forward search runs out of room.
        Second stage: any slot that merely does not overlap. None when nothing fits.
        """
        if len(available_slots) <= len(selected):
            return None

        spaced = [s for s in available_slots if not self._overlaps_any(s, selected, min_gap)]
        if spaced:
            return pick(self.rng, spaced)

        free = [s for s in available_slots if not self._overlaps_any(s, selected, 0)]
        if free:
            return pick(self.rng, free)
        return None

    @staticmethod
    def _overlaps_any(slot: TimeSlot, selected: List[TimeSlot], gap: int) -> bool:
        return any(
            slot.start_minute < other.end_minute + gap and slot.end_minute > other.start_minute - gap
            for other in selected
        )


def distribute_repetitions(
    available_slots: List[TimeSlot],
    repetitions: int,
    allow_consecutive: bool = False,
    rng: Optional[RandomSource] = None
) -> List[TimeSlot]:
    """Functional shortcut around `RepetitionDistributor.distribute`."""
    return RepetitionDistributor(rng=rng).distribute(available_slots, repetitions, allow_consecutive)
