"""Console board listing every market's status and the next session transition."""

from typing import Optional, Sequence

from src.market_sessions.clock.zone_clock import ZoneClock
from src.market_sessions.market_clock import MarketClock
from src.market_sessions.scheduling.global_scheduler import GlobalScheduler
from src.market_sessions.sessions.market_event import EventKind
from src.utils.exchange.market_schedule import MarketSchedule
from src.utils.io.logger import Logger


# pylint: disable=too-few-public-methods
class MarketBoard:
    """Logs a one-shot snapshot of the tracked markets."""

    @staticmethod
    def print_board(
        markets: Optional[Sequence[MarketSchedule]] = None,
        clock: Optional[ZoneClock] = None,
    ) -> None:
        """Log one line per market followed by the next global event."""
        zone_clock = clock or ZoneClock()
        schedules = MarketClock.markets() if markets is None else list(markets)
        Logger.debug("Markets")
        for schedule in schedules:
            status = "OPEN" if MarketClock.is_market_open(schedule, zone_clock) else "CLOSED"
            local = zone_clock.local_time(schedule.timezone).strftime("%a %H:%M:%S")
            Logger.debug(f"  * {schedule.name} ({schedule.city}): {status} [{local}]")
        event = GlobalScheduler.next_event(schedules, zone_clock)
        if event is None:
            Logger.warning("No upcoming market event")
            return
        countdown = MarketClock.format_countdown(event.milliseconds_until)
        verb = "opens" if event.kind is EventKind.OPEN else "closes"
        Logger.info(f"Next: {event.market.name} {verb} in {countdown}")


if __name__ == "__main__":
    MarketBoard.print_board()
