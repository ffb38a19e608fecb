"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability import AvailabilityEngine
from .calendar_store import CalendarStore
from .exceptions import CalendarLoadError, InvalidRecordError, SlotFinderError
from .models import BusyInterval, Workday

__all__ = [
    "AvailabilityEngine",
    "BusyInterval",
    "CalendarLoadError",
    "CalendarStore",
    "InvalidRecordError",
    "SlotFinderError",
    "Workday",
]
