"""Zone-local wall-clock reading consumed by the session evaluator and event resolver."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd  # type: ignore

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ClockReading:
    """Civil weekday and time of day observed in a specific time zone.

    * weekday: Sunday-first index (Sunday = 0 … Saturday = 6).
    * hour, minute, second: 24-hour wall time.
    """

    weekday: int
    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        for field, upper in (
            ("weekday", 6),
            ("hour", 23),
            ("minute", 59),
            ("second", 59),
        ):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"`{field}` must be an integer")
            if not 0 <= value <= upper:
                raise ValueError(f"`{field}` must be between 0 and {upper}, got {value}")

    @property
    def minutes_of_day(self) -> int:
        """Minutes elapsed since local midnight, ignoring seconds."""
        return self.hour * 60 + self.minute

    @property
    def minutes_left_in_day(self) -> int:
        """Whole minutes from the start of the current minute until local midnight."""
        return MINUTES_PER_DAY - self.minutes_of_day

    @staticmethod
    def from_timestamp(value: pd.Timestamp) -> ClockReading:
        """Project a (zone-aware) timestamp onto its civil weekday and wall time."""
        # pandas weekday() is Monday-first
        return ClockReading(
            weekday=(value.weekday() + 1) % 7,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )
