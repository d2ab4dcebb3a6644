"""
Scheduler State Management.

This module acts as the 'Memory' of a single scheduling run.
It tracks:
1. The occupied-slot set (the only thing enforcing cross-category non-overlap).
2. The activities placed so far and per-category placement counts.
3. Placement failures (unplaceable categories, dropped repetitions) for reporting.

A fresh state is created for every run and discarded afterwards.
"""

from typing import List, Dict, Any, Optional
from collections import defaultdict
from dataclasses import dataclass

from models import Category, ScheduledActivity, TimeSlot


@dataclass
class PlacementFailure:
    """Why (part of) a category could not be placed."""
    failure_type: str  # "Unplaceable" or "Unsatisfiable"
    reason: str
    category_id: str
    repetition_index: Optional[int] = None


class SchedulerState:
    """
    Maintains the mutable state of the scheduler during one run.
    The occupied set only grows; nothing is ever released mid-run.
    """

    def __init__(self):
        self.occupied_slots: List[TimeSlot] = []
        self.scheduled: List[ScheduledActivity] = []

        # Category Tracking
        self.categories: Dict[str, Category] = {}
        self.placed_counts: Dict[str, int] = defaultdict(int)

        # Failure Tracking
        self.failures: List[PlacementFailure] = []

    def register(self, category: Category) -> None:
        """Remember a category so reports can compare requested vs placed."""
        self.categories[category.id] = category

    def add_booking(self, category: Category, slot: TimeSlot, activity: ScheduledActivity) -> None:
        """
        Commit a placed activity.
        Its slot joins the occupied set, tagged with the owning category.
        """
        self.occupied_slots.append(slot.occupy(category.id))
        self.scheduled.append(activity)
        self.placed_counts[category.id] += 1

    def record_failure(self, failure: PlacementFailure) -> None:
        self.failures.append(failure)

    # --- Query Methods ---

    def get_slots_for_category(self, category_id: str) -> List[TimeSlot]:
        return [slot for slot in self.occupied_slots if slot.occupied_by == category_id]

    def get_placed_count(self, category_id: str) -> int:
        return self.placed_counts[category_id]

    # --- Reporting Methods ---

    def get_statistics(self) -> Dict[str, Any]:
        """Requested vs placed totals for the run."""
        requested = sum(c.repetitions for c in self.categories.values())
        placed = len(self.scheduled)
        fill_rate = (placed / requested * 100) if requested else 0.0

        per_category = {}
        for cid, category in self.categories.items():
            per_category[category.name or cid] = f"{self.placed_counts[cid]}/{category.repetitions}"

        return {
            "total_activities": placed,
            "requested_activities": requested,
            "fill_rate": f"{fill_rate:.1f}%",
            "per_category": per_category,
            "booked_minutes": sum(slot.duration for slot in self.occupied_slots),
            "failure_count": len(self.failures),
        }

    def get_failure_report(self) -> List[Dict]:
        """
        Categories that ended up with fewer activities than requested,
        largest shortfall first.
        """
        by_category: Dict[str, List[PlacementFailure]] = defaultdict(list)
        for failure in self.failures:
            by_category[failure.category_id].append(failure)

        report = []
        for cid, failures in by_category.items():
            category = self.categories.get(cid)
            requested = category.repetitions if category else 0
            placed = self.placed_counts[cid]
            report.append({
                "category_id": cid,
                "category_name": category.name if category else cid,
                "requested": requested,
                "placed": placed,
                "shortfall": requested - placed,
                "failure_type": failures[0].failure_type,
                "latest_reason": failures[-1].reason,
            })

        report.sort(key=lambda x: x["shortfall"], reverse=True)
        return report

    def clear(self) -> None:
        """Reset state (useful for testing or re-running)."""
        self.occupied_slots.clear()
        self.scheduled.clear()
        self.categories.clear()
        self.placed_counts.clear()
        self.failures.clear()
