"""
Weekly schedule normalization.

Lessons are stored against historical dates but describe a recurring weekly
timetable. Before a calendar is drawn every occurrence is moved onto the week
that contains the reference instant, keeping its weekday and time of day.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, Optional

from django.utils.dateparse import parse_datetime

logger = logging.getLogger(__name__)


class InvalidReference(ValueError):
    """Raised when normalization is asked for without a usable reference instant"""


@dataclass(frozen=True)
class LessonOccurrence:
    """One scheduled instance of a recurring weekly lesson"""

    id: Any
    title: str
    start: Any
    end: Any

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def as_event(self) -> dict:
        """Calendar event payload (JSON friendly)"""
        return {
            "id": self.id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


@dataclass(frozen=True)
class NormalizedOccurrence(LessonOccurrence):
    """An occurrence whose dates fall in the reference week"""


def _as_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return parse_datetime(value.strip())
        except ValueError:
            return None
    return None


def week_anchor(reference) -> datetime:
    """
    Midnight of the Monday that starts the ISO week containing ``reference``.

    A Monday reference anchors on its own midnight.
    """
    if isinstance(reference, datetime):
        ref_date, tzinfo = reference.date(), reference.tzinfo
    elif isinstance(reference, date):
        ref_date, tzinfo = reference, None
    else:
        raise InvalidReference(f"Cannot anchor a week on {reference!r}")

    monday = ref_date - timedelta(days=(ref_date.isoweekday() - 1 + 7) % 7)
    return datetime(monday.year, monday.month, monday.day, tzinfo=tzinfo)


def _shift(occurrence: LessonOccurrence, monday: date) -> Optional[NormalizedOccurrence]:
    start = _as_datetime(getattr(occurrence, "start", None))
    end = _as_datetime(getattr(occurrence, "end", None))
    if start is None or end is None:
        return None
    try:
        if end < start:
            return None
    except TypeError:
        # naive and aware timestamps on the same row
        return None

    # end keeps its own day offset from start so overnight spans survive
    day_delta = (end.date() - start.date()).days
    new_start_date = monday + timedelta(days=start.isoweekday() - 1)
    new_end_date = new_start_date + timedelta(days=day_delta)

    return NormalizedOccurrence(
        id=occurrence.id,
        title=occurrence.title,
        start=datetime.combine(new_start_date, start.timetz()),
        end=datetime.combine(new_end_date, end.timetz()),
    )


def normalize(
    occurrences: Iterable[LessonOccurrence], reference
) -> List[NormalizedOccurrence]:
    """
    Map every occurrence onto the week of ``reference``.

    Weekday, time of day and the start-to-end day offset of each occurrence
    are kept; only the calendar date changes. Rows with missing or
    unparseable timestamps are dropped. Output order follows input order.

    Raises:
        InvalidReference: if ``reference`` is not a date or datetime
    """
    if reference is None:
        raise InvalidReference("A reference instant is required")
    monday = week_anchor(reference).date()

    normalized = []
    for occurrence in occurrences:
        shifted = _shift(occurrence, monday)
        if shifted is None:
            logger.warning(
                "Skipping malformed lesson occurrence %r (start=%r, end=%r)",
                getattr(occurrence, "id", None),
                getattr(occurrence, "start", None),
                getattr(occurrence, "end", None),
            )
            continue
        normalized.append(shifted)
    return normalized
