"""
Domain-specific exception hierarchy for the slot finder application.
"""


class SlotFinderError(Exception):
    """Base class for all application-level errors."""


class CalendarLoadError(SlotFinderError):
    """Raised when calendar data cannot be read."""


class InvalidRecordError(CalendarLoadError):
    """Raised when a calendar record is malformed and loading must abort."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Invalid record on line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason
