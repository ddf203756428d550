"""
Live "current time" marker for the weekly calendar grid.

Every hour row of the grid owns one ``TimeIndicator``. The indicator only knows
the hour its row starts at; it reads the clock on each tick and decides whether
a marker should be drawn in that row and where.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

OUT_OF_RANGE_LABEL = "Current time"
IN_RANGE_LABEL = "Now"


def grid_bounds():
    """(first_hour, last_hour) of the visible grid, last hour exclusive"""
    return (
        getattr(settings, "TIMETABLE_FIRST_HOUR", 6),
        getattr(settings, "TIMETABLE_LAST_HOUR", 18),
    )


def grid_hours():
    first_hour, last_hour = grid_bounds()
    return list(range(first_hour, last_hour))


def refresh_interval():
    return getattr(settings, "TIMETABLE_INDICATOR_INTERVAL", 60)


@dataclass(frozen=True)
class TimeIndicatorState:
    visible: bool
    offset_percent: float = 0.0
    out_of_range: bool = False

    @property
    def label(self) -> str:
        if not self.visible:
            return ""
        return OUT_OF_RANGE_LABEL if self.out_of_range else IN_RANGE_LABEL

    def as_dict(self) -> dict:
        return {
            "visible": self.visible,
            "offset_percent": self.offset_percent,
            "out_of_range": self.out_of_range,
            "label": self.label,
        }


HIDDEN = TimeIndicatorState(visible=False)


def evaluate(hour, minute, start_hour, first_hour=6, last_hour=18) -> TimeIndicatorState:
    """
    Indicator state for the grid row starting at ``start_hour``.

    Before the grid the marker is pinned to the top, after it to the bottom.
    Inside the grid only the row of the current hour shows it.
    """
    if hour < first_hour:
        return TimeIndicatorState(visible=True, offset_percent=0.0, out_of_range=True)
    if hour >= last_hour:
        return TimeIndicatorState(visible=True, offset_percent=100.0, out_of_range=True)
    if hour == start_hour:
        return TimeIndicatorState(
            visible=True, offset_percent=(minute / 60) * 100, out_of_range=False
        )
    return HIDDEN


class IndicatorTicker:
    """
    Cancellable periodic task: runs ``callback`` once on ``start()`` and then
    every ``interval`` seconds until ``stop()``.
    """

    def __init__(self, callback: Callable[[], None], interval: Optional[float] = None, name=None):
        self.callback = callback
        self.interval = refresh_interval() if interval is None else interval
        self.name = name or "indicator-ticker"
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            return self
        self._stopped.clear()
        self._tick()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout: Optional[float] = None):
        self._stopped.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self):
        while not self._stopped.wait(self.interval):
            self._tick()

    def _tick(self):
        try:
            self.callback()
        except Exception:
            logger.exception("Ticker %s callback failed", self.name)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class TimeIndicator:
    """Indicator for a single hour row of the calendar grid"""

    def __init__(self, start_hour, hour_index=None, clock=None, bounds=None):
        self.start_hour = start_hour
        first_hour, last_hour = bounds or grid_bounds()
        self.first_hour = first_hour
        self.last_hour = last_hour
        self.hour_index = start_hour - first_hour if hour_index is None else hour_index
        self.clock = clock or timezone.localtime
        self.state = HIDDEN
        self._ticker: Optional[IndicatorTicker] = None

    def refresh(self) -> TimeIndicatorState:
        try:
            now = self.clock()
            self.state = evaluate(
                now.hour, now.minute, self.start_hour, self.first_hour, self.last_hour
            )
        except Exception:
            logger.warning("Clock unavailable for indicator row %s", self.start_hour, exc_info=True)
            self.state = HIDDEN
        return self.state

    def start(self, interval: Optional[float] = None):
        if self._ticker is None:
            self._ticker = IndicatorTicker(
                self.refresh, interval, name=f"time-indicator-{self.start_hour}"
            )
        self._ticker.start()
        return self

    def stop(self):
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    @property
    def is_running(self) -> bool:
        return self._ticker is not None and self._ticker.is_running

    def __repr__(self):
        return f"<TimeIndicator row={self.hour_index} hour={self.start_hour} {self.state}>"
