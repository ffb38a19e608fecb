"""
CSV calendar source: loads busy intervals from delimited text.

Each record is ``name, label, start, end`` with 24-hour ``HH:MM`` times.
Fields are trimmed, blank lines are ignored and labels may be quoted to
contain commas. Extra trailing fields are ignored.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Tuple, Union

import pendulum

from ..domain.calendar_store import CalendarStore
from ..domain.exceptions import CalendarLoadError, InvalidRecordError
from ..domain.models import BusyInterval

logger = logging.getLogger(__name__)

SAMPLE_CALENDAR = Path(__file__).parent / "sample_calendar.csv"

TIME_FORMAT = "HH:mm"
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")
NUM_OF_FIELDS = 4


class InvalidRecordPolicy(str, Enum):
    """What to do with a record that cannot be parsed."""
    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True)
class RecordIssue:
    """A record that was rejected while loading."""
    line_number: int
    reason: str
    raw: Tuple[str, ...]


@dataclass
class LoadReport:
    """Summary of a load: how many records were kept and which were skipped."""
    loaded: int = 0
    issues: List[RecordIssue] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.issues)


def parse_time_of_day(value: str) -> time:
    """
    Parse a strict 24-hour ``HH:MM`` string.

    Raises:
        ValueError: If the value is not a valid time of day
    """
    value = value.strip()
    if not TIME_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not in HH:MM format")

    parsed = pendulum.from_format(value, TIME_FORMAT)
    return time(hour=parsed.hour, minute=parsed.minute)


def parse_record(fields: List[str]) -> Tuple[str, BusyInterval]:
    """
    Turn one CSV row into a participant name and busy interval.

    Raises:
        ValueError: If the row is malformed
    """
    if len(fields) < NUM_OF_FIELDS:
        raise ValueError(f"expected {NUM_OF_FIELDS} fields, got {len(fields)}")

    name, label, start_raw, end_raw = (value.strip() for value in fields[:NUM_OF_FIELDS])

    if not name:
        raise ValueError("participant name is empty")

    try:
        start = parse_time_of_day(start_raw)
        end = parse_time_of_day(end_raw)
    except ValueError as exc:
        raise ValueError(f"unparseable time: {exc}") from exc

    if end < start:
        raise ValueError(f"end {end_raw} is before start {start_raw}")

    return name, BusyInterval(start=start, end=end, label=label)


class CsvCalendarSource:
    """
    Loads a CSV calendar into a ``CalendarStore``.

    With ``InvalidRecordPolicy.SKIP`` malformed records are logged and left
    out while the rest of the file loads. With ``InvalidRecordPolicy.ABORT``
    the first malformed record raises ``InvalidRecordError``; callers should
    then discard the partially filled store.
    """

    def __init__(
        self,
        source: Union[Path, str, TextIO],
        *,
        on_invalid: InvalidRecordPolicy = InvalidRecordPolicy.SKIP,
        has_header: bool = False,
    ):
        """
        Initialize the source.

        Args:
            source: Path to a CSV file, or an already open text stream
            on_invalid: Policy for malformed records
            has_header: Skip the first non-blank row
        """
        self.source = Path(source) if isinstance(source, str) else source
        self.on_invalid = InvalidRecordPolicy(on_invalid)
        self.has_header = has_header

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "CsvCalendarSource":
        """Build a source over an in-memory CSV string."""
        return cls(io.StringIO(text), **kwargs)

    @property
    def description(self) -> str:
        if isinstance(self.source, Path):
            return str(self.source)
        return "<stream>"

    def load_into(self, store: CalendarStore) -> LoadReport:
        """
        Add every valid record to ``store``.

        Returns:
            LoadReport describing loaded and skipped records

        Raises:
            CalendarLoadError: If the file cannot be read
            InvalidRecordError: On a malformed record under the abort policy
        """
        report = LoadReport()

        for line_number, fields in self._read_rows():
            try:
                name, interval = parse_record(fields)
            except ValueError as exc:
                if self.on_invalid is InvalidRecordPolicy.ABORT:
                    raise InvalidRecordError(line_number, str(exc)) from exc

                logger.warning(
                    "Skipping invalid record on line %d of %s: %s",
                    line_number,
                    self.description,
                    exc,
                )
                report.issues.append(
                    RecordIssue(line_number=line_number, reason=str(exc), raw=tuple(fields))
                )
                continue

            store.add_interval(name, interval)
            report.loaded += 1

        logger.debug(
            "Loaded %d record(s) from %s, skipped %d",
            report.loaded,
            self.description,
            report.skipped,
        )
        return report

    def _read_rows(self) -> Iterator[Tuple[int, List[str]]]:
        try:
            if isinstance(self.source, Path):
                with open(self.source, "r", encoding="utf-8", newline="") as file_handle:
                    yield from self._iter_rows(file_handle)
            else:
                yield from self._iter_rows(self.source)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise CalendarLoadError(
                f"Could not read calendar file {self.description}: {exc}"
            ) from exc

    def _iter_rows(self, lines: Iterable[str]) -> Iterator[Tuple[int, List[str]]]:
        reader = csv.reader(lines, quotechar='"', skipinitialspace=True)
        header_pending = self.has_header

        for fields in reader:
            if not any(value.strip() for value in fields):
                continue
            if header_pending:
                header_pending = False
                continue
            yield reader.line_num, fields
