"""
Tests for domain models.
"""

import pytest
from datetime import time

from slotfinder.domain.models import BusyInterval, Workday


class TestBusyInterval:
    """Tests for BusyInterval model."""

    def test_create_interval(self):
        """Test creating an interval keeps its fields."""
        interval = BusyInterval(start=time(8, 0), end=time(9, 30), label="Standup")

        assert interval.start == time(8, 0)
        assert interval.end == time(9, 30)
        assert interval.label == "Standup"
        assert interval.duration_minutes() == 90

    def test_zero_length_interval_is_allowed(self):
        """Test that start == end is tolerated."""
        interval = BusyInterval(start=time(10, 0), end=time(10, 0))

        assert interval.duration_minutes() == 0


class TestWorkday:
    """Tests for Workday model."""

    def test_default_window(self):
        """Test the default 07:00 - 19:00 window."""
        workday = Workday()

        assert workday.start_time == time(7, 0)
        assert workday.end_time == time(19, 0)
        assert workday.minutes == 720

    def test_invalid_window_raises_error(self):
        """Test that a window closing before it opens raises ValueError."""
        with pytest.raises(ValueError, match="must be before end"):
            Workday(start_time=time(17, 0), end_time=time(9, 0))

        with pytest.raises(ValueError):
            Workday(start_time=time(9, 0), end_time=time(9, 0))

    def test_offset_of(self):
        """Test conversion from time of day to minute offset."""
        workday = Workday(start_time=time(7, 0), end_time=time(19, 0))

        assert workday.offset_of(time(7, 0)) == 0
        assert workday.offset_of(time(9, 30)) == 150
        assert workday.offset_of(time(19, 0)) == 720
        assert workday.offset_of(time(6, 15)) == -45

    def test_offset_ignores_seconds(self):
        workday = Workday()

        assert workday.offset_of(time(7, 1, 59)) == 1

    def test_time_at(self):
        """Test conversion from minute offset back to time of day."""
        workday = Workday(start_time=time(9, 30), end_time=time(17, 0))

        assert workday.time_at(0) == time(9, 30)
        assert workday.time_at(45) == time(10, 15)
        assert workday.time_at(workday.minutes) == time(17, 0)
