"""
Core business logic for finding common free meeting slots.

This is the heart of the application - pure domain logic without any
external dependencies (no file access, no network, no I/O).
"""

import logging
from datetime import time, timedelta
from typing import List, Sequence, Union

from .calendar_store import CalendarStore
from .models import BusyInterval, Workday

logger = logging.getLogger(__name__)

DurationLike = Union[int, timedelta]


class AvailabilityEngine:
    """
    Finds start times at which every requested participant is free.

    Algorithm:
    1. Drop participants the store does not know
    2. Rasterise each participant's busy intervals onto a per-minute lane
    3. Combine the lanes: a minute is busy if anyone is busy
    4. Scan the joint timeline, emitting a start time whenever a full
       ``duration`` window is free and skipping past the emitted window

    Every query builds its own timeline; the engine keeps no state between
    calls and never raises for well-typed input. Anything that cannot yield
    a slot (no participants, bad duration) returns an empty list.
    """

    def __init__(self, store: CalendarStore, workday: Workday | None = None):
        self.store = store
        self.workday = workday or Workday()

    def find_available_slots(
        self,
        participant_names: Sequence[str],
        duration: DurationLike,
    ) -> List[time]:
        """
        Find meeting start times for all known participants.

        Args:
            participant_names: Names to check; unknown names are ignored
            duration: Meeting length in minutes or as a timedelta

        Returns:
            Start times in chronological order, consecutive entries at
            least ``duration`` apart
        """
        participants = [name for name in participant_names if name in self.store]
        dropped = len(participant_names) - len(participants)
        if dropped:
            logger.debug("Ignoring %d unknown participant(s)", dropped)

        if not participants:
            return []

        duration_minutes = self._to_minutes(duration)
        if duration_minutes <= 0 or duration_minutes > self.workday.minutes:
            logger.debug(
                "Duration of %d minutes does not fit a %d minute workday",
                duration_minutes,
                self.workday.minutes,
            )
            return []

        timeline = self._build_joint_timeline(participants)
        offsets = self._scan_free_windows(timeline, duration_minutes)

        logger.debug(
            "Found %d slot(s) of %d minutes for %s",
            len(offsets),
            duration_minutes,
            ", ".join(participants),
        )

        return [self.workday.time_at(offset) for offset in offsets]

    @staticmethod
    def _to_minutes(duration: DurationLike) -> int:
        """Normalise a duration to whole minutes, flooring partial minutes."""
        if isinstance(duration, timedelta):
            return int(duration.total_seconds() // 60)
        return int(duration)

    def _build_joint_timeline(self, participants: Sequence[str]) -> List[bool]:
        """
        Combine every participant's busy lane into one timeline.

        ``True`` marks a minute where at least one participant is busy.
        """
        timeline = [False] * self.workday.minutes

        for participant in participants:
            lane = self._rasterise(self.store.intervals_for(participant))
            timeline = [joint or busy for joint, busy in zip(timeline, lane)]

        return timeline

    def _rasterise(self, intervals: Sequence[BusyInterval]) -> List[bool]:
        """
        Mark the minutes covered by ``intervals`` on a fresh lane.

        Parts of an interval outside the workday are clipped away.
        """
        lane = [False] * self.workday.minutes

        for interval in intervals:
            start = max(0, self.workday.offset_of(interval.start))
            end = min(self.workday.minutes, self.workday.offset_of(interval.end))
            for minute in range(start, end):
                lane[minute] = True

        return lane

    def _scan_free_windows(self, timeline: List[bool], duration: int) -> List[int]:
        """
        Collect non-overlapping start offsets of free windows.

        A window may start no later than ``len(timeline) - duration - 1``.
        After a hit the scan jumps past the whole window, so a free run of
        ``k * duration + r`` minutes yields exactly ``k`` starts.
        """
        offsets: List[int] = []
        last_start = len(timeline) - duration

        minute = 0
        while minute < last_start:
            if not any(timeline[minute:minute + duration]):
                offsets.append(minute)
                minute += duration
            else:
                minute += 1

        return offsets
