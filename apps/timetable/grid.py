"""
Calendar grid layout: weekday columns by hour rows.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional

from .indicator import HIDDEN, TimeIndicator, TimeIndicatorState, grid_bounds
from .schedule import NormalizedOccurrence

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
SCHOOL_DAYS = 5


@dataclass
class CalendarBlock:
    occurrence: NormalizedOccurrence
    column: int
    top_percent: float
    height_percent: float
    status: str = ""

    @property
    def title(self):
        return self.occurrence.title

    @property
    def start(self):
        return self.occurrence.start

    @property
    def end(self):
        return self.occurrence.end


@dataclass
class GridRow:
    hour: int
    index: int
    indicator: TimeIndicatorState
    cells: List[List[CalendarBlock]]

    @property
    def label(self):
        return f"{self.hour:02d}:00"


@dataclass
class CalendarGrid:
    week_start: date
    days: List[date]
    rows: List[GridRow]
    today: Optional[date] = None
    unplaced: List[NormalizedOccurrence] = field(default_factory=list)

    @property
    def columns(self):
        return [
            {"date": day, "name": WEEKDAY_NAMES[i], "is_today": day == self.today}
            for i, day in enumerate(self.days)
        ]

    @property
    def blocks(self):
        return [block for row in self.rows for cell in row.cells for block in cell]

    @classmethod
    def build(cls, occurrences, week_start, now=None, bounds=None, statuses=None):
        """
        Lay normalized occurrences out on the grid.

        Occurrences starting outside the visible hours are kept in
        ``unplaced``. Weekend columns only appear when a lesson needs them.
        ``now`` may be a datetime or a plain date; a date flags its column
        as today but has no time of day, so every row indicator is hidden.
        ``statuses`` maps occurrence ids to the status shown on each block.
        """
        first_hour, last_hour = bounds or grid_bounds()
        statuses = statuses or {}
        if isinstance(week_start, datetime):
            week_start = week_start.date()

        occurrences = list(occurrences)
        day_count = SCHOOL_DAYS
        if any(occ.start.isoweekday() > SCHOOL_DAYS for occ in occurrences):
            day_count = 7
        days = [week_start + timedelta(days=i) for i in range(day_count)]

        if isinstance(now, datetime):
            today, clock = now.date(), (lambda: now)
        else:
            today, clock = now, None

        rows = []
        for index, hour in enumerate(range(first_hour, last_hour)):
            if today is not None and clock is None:
                state = HIDDEN
            else:
                state = TimeIndicator(hour, index, clock=clock, bounds=(first_hour, last_hour)).refresh()
            rows.append(
                GridRow(
                    hour=hour,
                    index=index,
                    indicator=state,
                    cells=[[] for _ in days],
                )
            )

        unplaced = []
        for occ in occurrences:
            hour = occ.start.hour
            if not first_hour <= hour < last_hour:
                unplaced.append(occ)
                continue
            column = occ.start.isoweekday() - 1
            duration = (occ.end - occ.start).total_seconds()
            rows[hour - first_hour].cells[column].append(
                CalendarBlock(
                    occurrence=occ,
                    column=column,
                    top_percent=occ.start.minute / 60 * 100,
                    height_percent=duration / 3600 * 100,
                    status=statuses.get(occ.id, ""),
                )
            )

        return cls(
            week_start=week_start,
            days=days,
            rows=rows,
            today=today,
            unplaced=unplaced,
        )
