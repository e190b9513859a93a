"""Open/closed decision for a single market at a given zone-local clock reading."""

from src.market_sessions.clock.clock_reading import ClockReading
from src.utils.exchange.market_schedule import MarketSchedule

FRIDAY = 5
SATURDAY = 6


# pylint: disable=too-few-public-methods
class SessionEvaluator:
    """Decides whether a market session is open."""

    @staticmethod
    def is_open(schedule: MarketSchedule, clock: ClockReading) -> bool:
        """Return ``True`` if ``schedule`` is trading at ``clock``.

        Saturday is closed for every market, overnight sessions included. A regular
        session is open on ``[open, close)``. An overnight session is open from its
        opening time until midnight and from midnight until its closing time, except
        that it stays closed on Friday once the week's final close has passed.
        """
        if clock.weekday == SATURDAY:
            return False
        if not schedule.sessions_days.is_trading_day(clock.weekday):
            return False
        current = clock.minutes_of_day
        open_minutes = schedule.open_minutes
        close_minutes = schedule.close_minutes
        if schedule.is_overnight:
            if clock.weekday == FRIDAY and current >= close_minutes:
                return False
            return current >= open_minutes or current < close_minutes
        return open_minutes <= current < close_minutes
