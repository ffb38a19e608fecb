"""
Application service for finding shared meeting slots.

The service coordinates loading busy intervals through a calendar source and
delegates the availability calculation to the domain-level
``AvailabilityEngine``. This keeps the CLI thin and improves testability by
allowing the calendar source to be replaced via a simple protocol.
"""

from __future__ import annotations

import logging
from datetime import time
from typing import List, Protocol, Sequence

from ..adapters.csv_calendar import LoadReport
from ..domain.availability import AvailabilityEngine, DurationLike
from ..domain.calendar_store import CalendarStore
from ..domain.models import Workday

logger = logging.getLogger(__name__)


class CalendarSourceProtocol(Protocol):
    """Protocol describing the calendar source behaviour needed by the service."""

    def load_into(self, store: CalendarStore) -> LoadReport:
        """Add busy intervals to ``store`` and report what was loaded."""


class SlotFinderService:
    """
    Orchestrates calendar loading and slot calculation.

    Each load fills a brand-new store which replaces the current one only
    after the source has finished, so queries always see a complete
    snapshot and a failed load leaves the previous data in place.
    """

    def __init__(self, workday: Workday | None = None) -> None:
        self._workday = workday or Workday()
        self._store = CalendarStore()

    @property
    def workday(self) -> Workday:
        return self._workday

    @property
    def store(self) -> CalendarStore:
        """The currently published calendar snapshot."""
        return self._store

    def load(self, source: CalendarSourceProtocol) -> LoadReport:
        """
        Load a calendar source and publish it as the current snapshot.

        Raises:
            CalendarLoadError: If the source fails; the previous snapshot is kept
        """
        store = CalendarStore()
        report = source.load_into(store)
        self._store = store

        logger.debug(
            "Published calendar with %d participant(s), %d record(s) skipped",
            len(store),
            report.skipped,
        )
        return report

    def find_slots(
        self,
        participants: Sequence[str],
        duration: DurationLike,
    ) -> List[time]:
        """Compute meeting start times against the current snapshot."""
        engine = AvailabilityEngine(store=self._store, workday=self._workday)
        return engine.find_available_slots(list(participants), duration)

    def known_participants(self) -> List[str]:
        """Known participant names, sorted for display."""
        return sorted(self._store.known_participants())
