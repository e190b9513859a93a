"""Typed, validated, and fully-encapsulated representation of a market's trading.

session and the time zone it is expressed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.utils.exchange.hours import Hours


@dataclass
class SessionsHours:
    """Container pairing the regular session with its time zone.

    * regular: Mandatory :class:`utils.exchange.hours.Hours` for the trading session.
    * timezone: IANA timezone string (e.g. ``"America/New_York"``) used to interpret
       the session boundaries as zone-local wall time.
    """

    __slots__ = ("_regular", "_timezone")

    def __init__(self, regular: Hours, timezone: str) -> None:
        """Initialize the trading session of a market."""
        self.regular = regular
        self.timezone = timezone

    @property
    def regular(self) -> Hours:
        """Return the regular trading-session :class:`utils.exchange.hours.Hours`."""
        return self._regular

    @regular.setter
    def regular(self, value: Hours) -> None:
        if not isinstance(value, Hours):
            raise TypeError("`regular` must be an instance of `Hours`")
        self._regular = value

    @property
    def timezone(self) -> str:
        """Return the IANA timezone string associated with the session."""
        return self._timezone

    @timezone.setter
    def timezone(self, value: str) -> None:
        """Validate and assign the IANA timezone identifier."""
        if not isinstance(value, str):
            raise TypeError("`timezone` must be a string")
        value = value.strip()
        if len(value) == 0:
            raise ValueError("Invalid timezone: value is empty")
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Invalid timezone: '{value}'") from exc
        self._timezone = value

    @property
    def overnight(self) -> bool:
        """Return whether the regular session wraps past midnight."""
        return self._regular.overnight

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"regular": self.regular.to_json(), "timezone": self.timezone}
