"""Typed, validated, and fully-encapsulated representation of a trading session window.

The open and close times are zone-local ``HH:MM`` strings. A regular session opens and
closes on the same day, so ``open`` must come strictly before ``close``. An overnight
session spans midnight, so its ``close`` must come strictly before its ``open``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


# pylint: disable=too-few-public-methods
@dataclass
class Hours:
    """Container for a single session's open and close time.

    * open: Opening time in "HH:MM" format.
    * close: Closing time in "HH:MM" format.
    * overnight: ``True`` when the session opens on day D and closes on day D+1.
    """

    __slots__ = ("_open", "_close", "_overnight")

    def __init__(self, open_time: str, close_time: str, overnight: bool = False) -> None:
        """Initialize a trading session window."""
        if not isinstance(overnight, bool):
            raise TypeError("`overnight` must be bool")
        validated_open = self._validate_time(open_time, "open")
        validated_close = self._validate_time(close_time, "close")
        if overnight and validated_open <= validated_close:
            raise ValueError("`open` must be > `close` for an overnight session")
        if not overnight and validated_open >= validated_close:
            raise ValueError("`open` must be < `close` for a regular session")
        self._open = validated_open
        self._close = validated_close
        self._overnight = overnight

    @property
    def open(self) -> str:
        """Return the session opening time."""
        return self._open

    @property
    def close(self) -> str:
        """Return the session closing time."""
        return self._close

    @property
    def overnight(self) -> bool:
        """Return whether the session wraps past midnight."""
        return self._overnight

    @property
    def open_minutes(self) -> int:
        """Minutes after local midnight at which the session opens."""
        return self._to_minutes(self._open)

    @property
    def close_minutes(self) -> int:
        """Minutes after local midnight at which the session closes."""
        return self._to_minutes(self._close)

    @staticmethod
    def _to_minutes(value: str) -> int:
        hours, minutes = map(int, value.split(":"))
        return hours * 60 + minutes

    @staticmethod
    def _validate_time(value: Any, field: str) -> str:
        """Validate the time string."""
        if value is None:
            raise ValueError(f"`{field}` is not defined")
        if not isinstance(value, str):
            raise TypeError(f"`{field}` must be a string")
        value = value.strip()
        if not re.fullmatch(r"\d{2}:\d{2}", value):
            raise ValueError(f"`{field}` must be in 'HH:MM' format")
        hours, minutes = map(int, value.split(":"))
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError(f"`{field}` must be a valid time between 00:00 and 23:59")
        return value

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"open": self.open, "close": self.close, "overnight": self.overnight}
