"""
In-memory store of busy intervals per participant.
"""

from typing import Dict, FrozenSet, List, Tuple

from .models import BusyInterval


class CalendarStore:
    """
    Holds each participant's busy intervals in insertion order.

    Participants are matched by exact, case-sensitive name. A schedule is
    created on the first interval added for a name and is never removed.
    The store trusts its input: intervals are expected to be validated by
    whatever loaded them.
    """

    def __init__(self) -> None:
        self._schedules: Dict[str, List[BusyInterval]] = {}

    def add_interval(self, participant: str, interval: BusyInterval) -> None:
        """Append ``interval`` to the participant's schedule."""
        self._schedules.setdefault(participant, []).append(interval)

    def intervals_for(self, participant: str) -> Tuple[BusyInterval, ...]:
        """Return the participant's intervals, or an empty tuple if unknown."""
        return tuple(self._schedules.get(participant, ()))

    def known_participants(self) -> FrozenSet[str]:
        return frozenset(self._schedules)

    def __contains__(self, participant: object) -> bool:
        return participant in self._schedules

    def __len__(self) -> int:
        return len(self._schedules)
