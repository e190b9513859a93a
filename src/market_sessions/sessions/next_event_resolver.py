"""Duration until a single market's next open or close transition.

Durations are counted in whole minutes at day granularity, converted to milliseconds, and
then reduced by the seconds already elapsed in the current minute so that a countdown
ticks down to the second.
"""

from src.market_sessions.clock.clock_reading import MINUTES_PER_DAY, ClockReading
from src.market_sessions.sessions.market_event import (NO_EVENT_MS, EventKind,
                                                       MarketEvent)
from src.market_sessions.sessions.session_evaluator import (FRIDAY,
                                                            SessionEvaluator)
from src.utils.exchange.market_schedule import MarketSchedule

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
DAYS_PER_WEEK = 7


class NextEventResolver:
    """Computes the next transition of one market from a zone-local clock reading."""

    @staticmethod
    def _to_milliseconds(minutes: int, clock: ClockReading) -> int:
        return minutes * MS_PER_MINUTE - clock.second * MS_PER_SECOND

    @staticmethod
    def _minutes_until_day(clock: ClockReading, days_ahead: int, target_minutes: int) -> int:
        """Minutes from now until ``target_minutes`` on the day ``days_ahead`` from today."""
        return (
            clock.minutes_left_in_day
            + (days_ahead - 1) * MINUTES_PER_DAY
            + target_minutes
        )

    @staticmethod
    def _until_close(schedule: MarketSchedule, clock: ClockReading) -> MarketEvent:
        current = clock.minutes_of_day
        close_minutes = schedule.close_minutes
        if not schedule.is_overnight or clock.weekday == FRIDAY:
            minutes = close_minutes - current
        else:
            # overnight sessions only close for the weekend, on Friday
            days_until_friday = FRIDAY - clock.weekday
            if days_until_friday <= 0:
                days_until_friday += DAYS_PER_WEEK
            minutes = NextEventResolver._minutes_until_day(
                clock, days_until_friday, close_minutes
            )
        return MarketEvent(
            EventKind.CLOSE, NextEventResolver._to_milliseconds(minutes, clock)
        )

    @staticmethod
    def _until_open(schedule: MarketSchedule, clock: ClockReading) -> MarketEvent:
        current = clock.minutes_of_day
        open_minutes = schedule.open_minutes
        # offset 7 lands on today's weekday next week, so one-day schedules still match
        for offset in range(DAYS_PER_WEEK + 1):
            weekday = (clock.weekday + offset) % DAYS_PER_WEEK
            if not schedule.sessions_days.is_trading_day(weekday):
                continue
            if offset == 0:
                if current >= open_minutes:
                    continue
                minutes = open_minutes - current
            else:
                minutes = NextEventResolver._minutes_until_day(
                    clock, offset, open_minutes
                )
            milliseconds = NextEventResolver._to_milliseconds(minutes, clock)
            if milliseconds > 0:
                return MarketEvent(EventKind.OPEN, milliseconds)
        return MarketEvent(EventKind.OPEN, NO_EVENT_MS)

    @staticmethod
    def resolve(schedule: MarketSchedule, clock: ClockReading) -> MarketEvent:
        """Return the next close if the market is open, otherwise the next open."""
        if SessionEvaluator.is_open(schedule, clock):
            return NextEventResolver._until_close(schedule, clock)
        return NextEventResolver._until_open(schedule, clock)
