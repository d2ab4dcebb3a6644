"""Tests for scheduler/distributor.py — spreading repetitions over free slots."""

import random

from models import TimeSlot
from scheduler.distributor import RepetitionDistributor, distribute_repetitions
from scheduler.randomness import FixedSequenceRandom


def _slots(starts, duration):
    return [TimeSlot(start_minute=s, duration=duration) for s in starts]


def _overlap(a: TimeSlot, b: TimeSlot) -> bool:
    return a.start_minute < b.end_minute and a.end_minute > b.start_minute


def test_nothing_to_do():
    assert distribute_repetitions([], 3) == []
    assert distribute_repetitions(_slots([540], 30), 0) == []


def test_single_repetition_picks_any_slot():
    slots = _slots([540, 555, 570, 585, 600], 30)
    chosen = distribute_repetitions(slots, 1, rng=FixedSequenceRandom([2]))
    assert chosen == [slots[2]]


def test_first_pick_comes_from_first_third():
    slots = _slots(range(360, 1030, 10), 60)  # 67 slots
    first_third_end = slots[len(slots) // 3].start_minute
    for seed in range(30):
        chosen = distribute_repetitions(slots, 2, rng=random.Random(seed))
        assert chosen[0].start_minute < first_third_end


def test_repetitions_keep_ninety_minute_gap():
    slots = _slots(range(360, 1030, 10), 60)  # 06:00-18:00, one hour each
    for seed in range(50):
        chosen = distribute_repetitions(slots, 3, allow_consecutive=False, rng=random.Random(seed))
        assert len(chosen) == 3
        ordered = sorted(chosen, key=lambda s: s.start_minute)
        for earlier, later in zip(ordered, ordered[1:]):
            assert later.start_minute - earlier.end_minute >= 90


def test_consecutive_repetitions_only_avoid_overlap():
    slots = _slots(range(540, 600, 10), 30)  # 09:00-10:20 starts
    for seed in range(20):
        chosen = distribute_repetitions(slots, 2, allow_consecutive=True, rng=random.Random(seed))
        assert len(chosen) == 2
        assert not _overlap(chosen[0], chosen[1])


def test_falls_back_to_non_overlapping_slot_when_gap_is_impossible():
    slots = _slots([540, 570, 600], 30)
    chosen = distribute_repetitions(slots, 2, allow_consecutive=False, rng=FixedSequenceRandom([0, 1]))
    assert [s.start for s in chosen] == ["09:00", "10:00"]


def test_unsatisfiable_repetition_is_dropped():
    slots = _slots([540, 550, 560], 30)  # all mutually overlapping
    chosen = distribute_repetitions(slots, 2, allow_consecutive=True, rng=random.Random(1))
    assert len(chosen) == 1


def test_never_returns_more_than_requested():
    slots = _slots(range(0, 1400, 10), 15)
    chosen = distribute_repetitions(slots, 4, allow_consecutive=True, rng=random.Random(3))
    assert len(chosen) == 4
    for i, a in enumerate(chosen):
        for b in chosen[i + 1:]:
            assert not _overlap(a, b)


def test_same_random_sequence_same_choice():
    slots = _slots(range(480, 1050, 10), 30)
    first = RepetitionDistributor(rng=random.Random(42)).distribute(slots, 3)
    second = RepetitionDistributor(rng=random.Random(42)).distribute(slots, 3)
    assert first == second


def test_custom_gap():
    slots = _slots(range(480, 1050, 10), 30)
    distributor = RepetitionDistributor(rng=random.Random(5), min_gap_minutes=180)
    chosen = sorted(distributor.distribute(slots, 2), key=lambda s: s.start_minute)
    assert chosen[1].start_minute - chosen[0].end_minute >= 180


def test_fallback_prefers_a_slot_that_keeps_the_gap():
    # Anchor at 10:00 leaves nothing 90 minutes later, but 06:40 still clears it
    slots = _slots([400, 600, 610, 620, 630, 640], 30)
    chosen = distribute_repetitions(slots, 2, allow_consecutive=False, rng=FixedSequenceRandom([1, 2]))
    assert [s.start for s in chosen] == ["10:00", "06:40"]
    assert chosen[0].start_minute - chosen[1].end_minute >= 90
