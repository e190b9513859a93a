"""Conversion of millisecond durations into zero-padded countdown fields."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class Countdown:
    """Display units of a duration.

    ``days`` is ``None`` when the duration is shorter than a day; otherwise it holds the
    unpadded day count. The other fields are always two digits.
    """

    hours: str
    minutes: str
    seconds: str
    days: Optional[str] = None

    def total_seconds(self) -> int:
        """Rebuild the whole-second duration from the display fields."""
        return (
            int(self.days or 0) * SECONDS_PER_DAY
            + int(self.hours) * SECONDS_PER_HOUR
            + int(self.minutes) * SECONDS_PER_MINUTE
            + int(self.seconds)
        )

    def to_json(self) -> Dict[str, str]:
        """Object to JSON, omitting ``days`` when absent."""
        result: Dict[str, str] = {}
        if self.days is not None:
            result["days"] = self.days
        result.update(hours=self.hours, minutes=self.minutes, seconds=self.seconds)
        return result

    def __str__(self) -> str:
        clock = f"{self.hours}:{self.minutes}:{self.seconds}"
        return clock if self.days is None else f"{self.days}d {clock}"


# pylint: disable=too-few-public-methods
class CountdownFormatter:
    """Formats durations for countdown display."""

    @staticmethod
    def format(milliseconds: float) -> Countdown:
        """Split ``milliseconds`` into days, hours, minutes and seconds.

        Non-positive durations produce the zero state ``00:00:00``. Partial seconds are
        truncated.
        """
        if milliseconds <= 0:
            return Countdown(hours="00", minutes="00", seconds="00")
        total_seconds = math.floor(milliseconds / 1000)
        days = total_seconds // SECONDS_PER_DAY
        hours = (total_seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR
        minutes = (total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        seconds = total_seconds % SECONDS_PER_MINUTE
        return Countdown(
            hours=f"{hours:02d}",
            minutes=f"{minutes:02d}",
            seconds=f"{seconds:02d}",
            days=str(days) if days > 0 else None,
        )
