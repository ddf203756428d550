import threading
import time
from datetime import datetime

import pytest

from apps.timetable.indicator import (
    HIDDEN,
    IndicatorTicker,
    TimeIndicator,
    TimeIndicatorState,
    evaluate,
    grid_hours,
)


def test_first_row_at_start_of_grid():
    assert evaluate(6, 0, 6) == TimeIndicatorState(visible=True, offset_percent=0.0, out_of_range=False)


@pytest.mark.parametrize("start_hour", [6, 11, 17])
def test_before_grid_pins_to_top(start_hour):
    assert evaluate(5, 59, start_hour) == TimeIndicatorState(True, 0.0, True)


@pytest.mark.parametrize("hour", [18, 19, 23])
def test_after_grid_pins_to_bottom(hour):
    assert evaluate(hour, 10, 6) == TimeIndicatorState(True, 100.0, True)


def test_half_past_is_fifty_percent():
    state = evaluate(10, 30, 10)
    assert state.visible
    assert not state.out_of_range
    assert state.offset_percent == 50


def test_other_rows_are_hidden():
    assert evaluate(10, 15, 11) == HIDDEN
    assert not evaluate(10, 15, 11).visible


def test_labels():
    assert evaluate(10, 0, 10).label == "Now"
    assert evaluate(4, 0, 10).label == "Current time"
    assert HIDDEN.label == ""


def test_custom_grid_bounds():
    assert evaluate(7, 0, 9, first_hour=8, last_hour=16).out_of_range
    assert evaluate(16, 0, 9, first_hour=8, last_hour=16).offset_percent == 100


def test_grid_hours_follow_settings(settings):
    settings.TIMETABLE_FIRST_HOUR = 8
    settings.TIMETABLE_LAST_HOUR = 12
    assert grid_hours() == [8, 9, 10, 11]


def test_time_indicator_reads_clock():
    indicator = TimeIndicator(14, clock=lambda: datetime(2024, 6, 12, 14, 45))

    state = indicator.refresh()

    assert state.offset_percent == 75
    assert indicator.state is state
    assert indicator.hour_index == 8


def test_time_indicator_hides_when_clock_fails():
    def broken_clock():
        raise OSError("clock unavailable")

    indicator = TimeIndicator(9, clock=broken_clock)

    assert indicator.refresh() == HIDDEN


def test_ticker_runs_immediately_and_repeats():
    calls = []
    ticked = threading.Event()

    def callback():
        calls.append(1)
        if len(calls) >= 3:
            ticked.set()

    ticker = IndicatorTicker(callback, interval=0.01)
    ticker.start()
    assert len(calls) >= 1
    assert ticked.wait(2)
    ticker.stop()

    assert not ticker.is_running
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count


def test_ticker_stop_cancels_future_ticks():
    calls = []
    ticker = IndicatorTicker(lambda: calls.append(1), interval=60)

    with ticker:
        assert ticker.is_running
    assert not ticker.is_running
    assert calls == [1]


def test_ticker_can_restart_after_stop():
    calls = []
    ticker = IndicatorTicker(lambda: calls.append(1), interval=60)
    ticker.start()
    ticker.stop()
    ticker.start()
    assert ticker.is_running
    ticker.stop()
    assert calls == [1, 1]


def test_ticker_survives_callback_errors():
    calls = []
    survived = threading.Event()

    def callback():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        survived.set()

    with IndicatorTicker(callback, interval=0.01):
        assert survived.wait(2)


def test_indicator_start_stop_lifecycle():
    indicator = TimeIndicator(10, clock=lambda: datetime(2024, 6, 12, 10, 30))

    indicator.start(interval=60)
    assert indicator.is_running
    assert indicator.state.offset_percent == 50

    indicator.stop()
    assert not indicator.is_running
