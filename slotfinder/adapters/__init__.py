"""
Adapters layer - Loading calendar data from external representations.
"""

from .csv_calendar import (
    SAMPLE_CALENDAR,
    CsvCalendarSource,
    InvalidRecordPolicy,
    LoadReport,
    RecordIssue,
    parse_time_of_day,
)

__all__ = [
    "SAMPLE_CALENDAR",
    "CsvCalendarSource",
    "InvalidRecordPolicy",
    "LoadReport",
    "RecordIssue",
    "parse_time_of_day",
]
