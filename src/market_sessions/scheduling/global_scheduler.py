"""Selection of the soonest session transition across a roster of markets."""

from typing import Optional, Sequence

from src.market_sessions.clock.zone_clock import ZoneClock
from src.market_sessions.sessions.market_event import NextEvent
from src.market_sessions.sessions.next_event_resolver import NextEventResolver
from src.utils.exchange.market_schedule import MarketSchedule
from src.utils.io.logger import Logger


# pylint: disable=too-few-public-methods
class GlobalScheduler:
    """Resolves every market's next event and keeps the earliest one."""

    @staticmethod
    def next_event(
        schedules: Sequence[MarketSchedule], clock: Optional[ZoneClock] = None
    ) -> Optional[NextEvent]:
        """Return the soonest positive-duration event, or ``None`` if there is none.

        Each market is read in its own time zone. Ties keep the market listed first.
        """
        zone_clock = clock or ZoneClock()
        best: Optional[NextEvent] = None
        for schedule in schedules:
            event = NextEventResolver.resolve(schedule, zone_clock.read(schedule.timezone))
            if not event.resolvable:
                Logger.warning(
                    f"No upcoming {event.kind.value} could be resolved for '{schedule.market_id}'"
                )
                continue
            if best is None or event.milliseconds < best.milliseconds_until:
                best = NextEvent(
                    market=schedule,
                    kind=event.kind,
                    milliseconds_until=int(event.milliseconds),
                )
        return best
