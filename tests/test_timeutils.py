"""Tests for scheduler/timeutils.py — HH:MM arithmetic and range checks."""

import pytest

from models import TimeRange
from scheduler.timeutils import add_minutes, is_time_in_range, minutes_to_time, time_to_minutes


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("23:59") == 1439


def test_minutes_to_time_pads_and_does_not_wrap():
    assert minutes_to_time(5) == "00:05"
    assert minutes_to_time(570) == "09:30"
    # No modulo 24: callers normalize when they need a clock display
    assert minutes_to_time(1500) == "25:00"


def test_round_trip_up_to_hour_99():
    for hour in range(100):
        for minute in (0, 7, 30, 59):
            t = f"{hour:02d}:{minute:02d}"
            assert minutes_to_time(time_to_minutes(t)) == t


def test_add_minutes():
    assert add_minutes("09:00", 45) == "09:45"
    assert add_minutes("23:50", 20) == "24:10"


def test_malformed_time_fails_loudly():
    with pytest.raises(ValueError):
        time_to_minutes("0930")
    with pytest.raises(ValueError):
        time_to_minutes("ab:cd")


def test_in_range_is_closed_interval():
    window = TimeRange(start="09:00", end="17:00")
    assert is_time_in_range("09:00", window)
    assert is_time_in_range("17:00", window)
    assert is_time_in_range("12:30", window)
    assert not is_time_in_range("08:59", window)
    assert not is_time_in_range("17:01", window)


def test_in_range_across_midnight():
    window = TimeRange(start="22:00", end="02:00")
    assert is_time_in_range("22:00", window)
    assert is_time_in_range("23:30", window)
    assert is_time_in_range("00:00", window)
    assert is_time_in_range("02:00", window)
    assert not is_time_in_range("12:00", window)
    assert not is_time_in_range("02:01", window)
