"""Clock adapter projecting the current instant onto a market's time zone.

This is the only component that reads real time. Everything downstream receives a
:class:`ClockReading` and is therefore pure, which lets tests inject a fixed instant
through the ``now`` provider.
"""

from typing import Callable, Optional

import pandas as pd  # type: ignore
import pytz  # type: ignore

from src.market_sessions.clock.clock_reading import ClockReading
from src.utils.io.logger import Logger

NowProvider = Callable[[], pd.Timestamp]


def _utc_now() -> pd.Timestamp:
    return pd.Timestamp.now(tz="UTC")


class ZoneClock:
    """Reads the current instant and converts it to a zone-local :class:`ClockReading`."""

    def __init__(self, now: Optional[NowProvider] = None) -> None:
        self._now: NowProvider = now or _utc_now

    def now(self) -> pd.Timestamp:
        """Return the current instant as a UTC-aware timestamp."""
        instant = pd.Timestamp(self._now())
        if instant.tz is None:
            return instant.tz_localize("UTC")
        return instant.tz_convert("UTC")

    def local_time(self, timezone: str) -> pd.Timestamp:
        """Return the current instant expressed in ``timezone``."""
        try:
            zone = pytz.timezone(timezone)
        except pytz.UnknownTimeZoneError as exc:
            Logger.error(f"Invalid timezone: {timezone}. Exception: {exc}")
            raise
        return self.now().tz_convert(zone)

    def read(self, timezone: str) -> ClockReading:
        """Return the zone-local weekday and wall time for the current instant."""
        return ClockReading.from_timestamp(self.local_time(timezone))
