"""Tests for scheduler/slots.py — candidate slot discovery."""

from models import Category, Location, TimeRange, TimeSlot
from scheduler.slots import SlotGenerator, generate_available_slots


def _make_category(start: str, end: str, duration: int, repetitions: int = 1) -> Category:
    return Category(
        id="cat",
        name="Test",
        locations=[Location(id="loc", address="Somewhere 1")],
        activity_duration=duration,
        time_range=TimeRange(start=start, end=end),
        repetitions=repetitions,
    )


def _booked(start_minute: int, duration: int) -> TimeSlot:
    return TimeSlot(start_minute=start_minute, duration=duration).occupy("other")


def test_single_repetition_uses_fifteen_minute_step():
    slots = generate_available_slots(_make_category("09:00", "10:00", 30), [])
    assert [s.start for s in slots] == ["09:00", "09:15", "09:30"]
    assert slots[-1].end == "10:00"
    assert all(not s.occupied for s in slots)


def test_repeated_category_uses_finer_step():
    slots = generate_available_slots(_make_category("09:00", "10:00", 30, repetitions=2), [])
    assert [s.start for s in slots] == ["09:00", "09:10", "09:20", "09:30"]


def test_slots_keep_a_buffer_around_booked_time():
    booked = [_booked(570, 30)]  # 09:30-10:00
    slots = generate_available_slots(_make_category("09:00", "11:00", 30), booked)
    assert [s.start for s in slots] == ["10:15", "10:30"]


def test_window_shorter_than_duration_is_empty():
    assert generate_available_slots(_make_category("09:00", "09:20", 30), []) == []


def test_fully_booked_window_is_empty():
    booked = [_booked(540, 120)]
    assert generate_available_slots(_make_category("09:00", "11:00", 30), booked) == []


def test_window_crossing_midnight_stays_monotonic():
    slots = generate_available_slots(_make_category("23:00", "01:00", 60), [])
    assert [s.start for s in slots] == ["23:00", "23:15", "23:30", "23:45", "00:00"]
    assert slots[-1].end == "01:00"
    minutes = [s.start_minute for s in slots]
    assert minutes == sorted(minutes)


def test_booking_just_after_midnight_blocks_late_slots():
    booked = [_booked(0, 30)]  # 00:00-00:30
    slots = generate_available_slots(_make_category("23:00", "00:00", 30), booked)
    assert [s.start for s in slots] == ["23:00", "23:15"]


def test_every_slot_has_category_duration():
    slots = generate_available_slots(_make_category("06:00", "18:00", 45, repetitions=3), [])
    assert slots
    assert all(s.end_minute - s.start_minute == 45 for s in slots)


def test_generator_constants_are_tunable():
    generator = SlotGenerator(slot_interval=30, buffer_minutes=0)
    booked = [_booked(570, 30)]  # 09:30-10:00
    slots = generator.generate(_make_category("09:00", "11:00", 30), booked)
    assert [s.start for s in slots] == ["09:00", "10:00", "10:30"]
