"""Unit tests for SessionEvaluator.is_open with synthetic clock readings."""

from typing import Dict

import pytest  # type: ignore

from src.market_sessions.clock.clock_reading import ClockReading
from src.market_sessions.sessions.session_evaluator import SessionEvaluator
from src.utils.exchange.market_schedule import MarketSchedule

WEEKDAYS = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]

SUN, MON, TUE, WED, THU, FRI, SAT = range(7)


def _days(*enabled: int) -> Dict[str, bool]:
    return {name: idx in enabled for idx, name in enumerate(WEEKDAYS)}


def _schedule(open_time, close_time, days, overnight=False) -> MarketSchedule:
    return MarketSchedule.from_parameter(
        {
            "id": "test",
            "name": "Test",
            "city": "Test",
            "timezone": "UTC",
            "sessions_days": days,
            "sessions_hours": {
                "regular": {"open": open_time, "close": close_time},
                "overnight": overnight,
            },
            "latitude": 0.0,
            "longitude": 0.0,
        },
        WEEKDAYS,
    )


NYSE = _schedule("09:30", "16:00", _days(MON, TUE, WED, THU, FRI))
CME = _schedule("17:00", "16:00", _days(SUN, MON, TUE, WED, THU, FRI), overnight=True)


def _at(weekday: int, hour: int, minute: int, second: int = 0) -> ClockReading:
    return ClockReading(weekday=weekday, hour=hour, minute=minute, second=second)


@pytest.mark.parametrize(
    "clock, expected",
    [
        (_at(MON, 9, 29, 59), False),
        (_at(MON, 9, 30, 0), True),
        (_at(MON, 15, 59, 59), True),
        (_at(MON, 16, 0, 0), False),
        (_at(SUN, 12, 0), False),
        (_at(SAT, 12, 0), False),
    ],
)
def test_regular_session_boundaries(clock, expected):
    """Regular sessions are open on [open, close) of trading days only."""
    if SessionEvaluator.is_open(NYSE, clock) is not expected:
        raise AssertionError(f"Expected {expected} at {clock}")


@pytest.mark.parametrize(
    "clock, expected",
    [
        (_at(SUN, 18, 0), True),
        (_at(WED, 3, 0), True),
        (_at(WED, 16, 30), False),
        (_at(WED, 17, 0), True),
        (_at(FRI, 15, 59, 59), True),
        (_at(FRI, 16, 0, 0), False),
        (_at(FRI, 20, 0), False),
        (_at(SAT, 3, 0), False),
    ],
)
def test_overnight_session(clock, expected):
    """Overnight sessions wrap midnight and stop at Friday's close."""
    if SessionEvaluator.is_open(CME, clock) is not expected:
        raise AssertionError(f"Expected {expected} at {clock}")


def test_saturday_is_always_closed():
    """Saturday closes every market, even one configured to trade on it."""
    every_day = _schedule("00:00", "23:59", _days(*range(7)))
    every_night = _schedule("12:00", "11:00", _days(*range(7)), overnight=True)
    for minute_of_day in (0, 600, 1439):
        clock = _at(SAT, minute_of_day // 60, minute_of_day % 60)
        if SessionEvaluator.is_open(every_day, clock):
            raise AssertionError("Expected Saturday closure for regular session")
        if SessionEvaluator.is_open(every_night, clock):
            raise AssertionError("Expected Saturday closure for overnight session")
    if not SessionEvaluator.is_open(every_day, _at(SUN, 10, 0)):
        raise AssertionError("Expected Sunday to be open when configured")


def test_non_trading_day_is_closed_for_overnight():
    """Overnight sessions also respect the trading day set."""
    weekdays_only = _schedule(
        "18:00", "17:00", _days(MON, TUE, WED, THU, FRI), overnight=True
    )
    if SessionEvaluator.is_open(weekdays_only, _at(SUN, 19, 0)):
        raise AssertionError("Expected Sunday to be closed")
