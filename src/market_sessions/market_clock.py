"""Public entry points of the market sessions engine.

Presentation layers call these once per refresh: the open/closed state of each market,
the next global session transition and its formatted countdown. The roster is loaded
once from :class:`ParameterLoader` and never changes afterwards.
"""

from typing import List, Optional

from src.market_sessions.clock.zone_clock import ZoneClock
from src.market_sessions.formatting.countdown_formatter import (
    Countdown, CountdownFormatter)
from src.market_sessions.scheduling.global_scheduler import GlobalScheduler
from src.market_sessions.sessions.market_event import NextEvent
from src.market_sessions.sessions.session_evaluator import SessionEvaluator
from src.utils.config.parameters import ParameterLoader
from src.utils.exchange.market_schedule import MarketSchedule


class MarketClock:
    """Static facade over the roster, the session evaluator and the global scheduler."""

    _PARAMS = ParameterLoader()
    _MARKETS: List[MarketSchedule] = _PARAMS.markets()

    @staticmethod
    def markets() -> List[MarketSchedule]:
        """Return the tracked markets in roster order."""
        return list(MarketClock._MARKETS)

    @staticmethod
    def is_market_open(
        schedule: MarketSchedule, clock: Optional[ZoneClock] = None
    ) -> bool:
        """Return whether ``schedule`` is trading right now."""
        zone_clock = clock or ZoneClock()
        return SessionEvaluator.is_open(schedule, zone_clock.read(schedule.timezone))

    @staticmethod
    def get_next_market_event(clock: Optional[ZoneClock] = None) -> Optional[NextEvent]:
        """Return the soonest open or close across the roster, if any."""
        return GlobalScheduler.next_event(MarketClock._MARKETS, clock)

    @staticmethod
    def format_countdown(milliseconds: float) -> Countdown:
        """Format a duration for countdown display."""
        return CountdownFormatter.format(milliseconds)
