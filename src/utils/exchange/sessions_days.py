"""Typed, validated, and fully-encapsulated representation of a market's.

weekly trading schedule.

Weekdays are indexed Sunday-first (Sunday = 0 … Saturday = 6), which is the convention
used by every clock reading in :mod:`src.market_sessions`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List


@dataclass
class SessionsDays:
    """Container holding the weekly trading availability for a market.

    ``weekdays`` lists the seven day names in index order, so ``weekdays[0]`` is the
    name of day ``0`` (Sunday).
    """

    __slots__ = ("_weekdays", "_flags")

    def __init__(self, days: Dict[str, bool], weekdays: List[str]) -> None:
        """Create a :class:`SessionsDays` from a *day → bool* mapping."""
        if not isinstance(days, dict):
            raise TypeError("`days` must be `Dict[str, bool]`")
        if not isinstance(weekdays, list) or len(weekdays) != 7:
            raise ValueError("`weekdays` must list exactly seven day names")
        normalized = {str(key).strip().lower(): val for key, val in days.items()}
        missing = [d for d in weekdays if d not in normalized]
        if missing:
            raise ValueError(f"Missing keys in `days`: {', '.join(missing)}")
        for key, val in normalized.items():
            if key not in weekdays:
                raise ValueError(f"Unexpected key in `days`: '{key}'")
            if not isinstance(val, bool):
                raise TypeError(
                    f"Value for '{key}' must be bool, got {type(val).__name__}"
                )
        flags = tuple(normalized[day] for day in weekdays)
        if not any(flags):
            raise ValueError("At least one trading day must be enabled")
        self._weekdays: List[str] = list(weekdays)
        self._flags = flags

    def is_trading_day(self, weekday: int) -> bool:
        """Return ``True`` if the Sunday-first weekday index is an enabled trading day."""
        if not isinstance(weekday, int) or not 0 <= weekday <= 6:
            raise ValueError(f"`weekday` must be an integer in 0..6, got {weekday!r}")
        return self._flags[weekday]

    def trading_days(self) -> FrozenSet[int]:
        """Return the Sunday-first indices of all enabled trading days."""
        return frozenset(idx for idx, flag in enumerate(self._flags) if flag)

    def open_days(self) -> List[str]:
        """Return the names of all weekdays where the market trades."""
        return [day for day, flag in zip(self._weekdays, self._flags) if flag]

    def to_json(self) -> Dict[str, bool]:
        """Return a JSON-serialisable mapping of weekday flags."""
        return dict(zip(self._weekdays, self._flags))

    def __iter__(self) -> Iterator[bool]:
        """Iterate over the seven weekday flags, Sunday first."""
        yield from self._flags
