"""
Domain models for busy intervals and the workday window.
"""

from dataclasses import dataclass
from datetime import time


def _minute_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class BusyInterval:
    """
    A half-open ``[start, end)`` range during which a participant is busy.

    Zero-length intervals are allowed and block nothing. Intervals reaching
    outside the workday are clipped when rasterised, not rejected here.
    """
    start: time
    end: time
    label: str = ""

    def duration_minutes(self) -> int:
        """Return the length in whole minutes (never negative)."""
        return max(0, _minute_of_day(self.end) - _minute_of_day(self.start))


@dataclass(frozen=True)
class Workday:
    """
    The schedulable window of a single day.

    Invariant: start_time must be before end_time.
    """
    start_time: time = time(7, 0)
    end_time: time = time(19, 0)

    def __post_init__(self):
        if self.start_time >= self.end_time:
            raise ValueError(
                f"Workday start {self.start_time} must be before end {self.end_time}"
            )

    @property
    def minutes(self) -> int:
        """Length of the window in minutes."""
        return _minute_of_day(self.end_time) - _minute_of_day(self.start_time)

    def offset_of(self, value: time) -> int:
        """
        Minutes from the start of the workday to ``value``.

        Negative for times before the window opens; seconds are ignored.
        """
        return _minute_of_day(value) - _minute_of_day(self.start_time)

    def time_at(self, offset: int) -> time:
        """Convert a minute offset back to a time of day."""
        hour, minute = divmod(_minute_of_day(self.start_time) + offset, 60)
        return time(hour=hour, minute=minute)

    def __str__(self) -> str:
        return f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"
