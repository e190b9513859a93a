"""Typed and validated representation of a tracked market and its weekly schedule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Set

from src.utils.exchange.hours import Hours
from src.utils.exchange.sessions_days import SessionsDays
from src.utils.exchange.sessions_hours import SessionsHours


@dataclass
class MarketConfig:
    """Typed configuration container for initializing a MarketSchedule instance."""

    market_id: str
    name: str
    city: str
    sessions_days: SessionsDays
    sessions_hours: SessionsHours
    latitude: float
    longitude: float


class MarketSchedule:
    """Immutable container for a market's identity, location and trading session.

    * market_id: Stable lowercase identifier (e.g. ``"nyse"``).
    * name, city: Display labels.
    * sessions_days: Weekdays on which the session may open.
    * sessions_hours: Zone-local session window and its IANA time zone.
    * latitude, longitude: Display-only coordinates.
    """

    __slots__ = (
        "_market_id",
        "_name",
        "_city",
        "_sessions_days",
        "_sessions_hours",
        "_latitude",
        "_longitude",
    )

    def __init__(self, config: MarketConfig) -> None:
        self._market_id = self._validate_str(config.market_id, "id").lower()
        self._name = self._validate_str(config.name, "name")
        self._city = self._validate_str(config.city, "city")
        if not isinstance(config.sessions_days, SessionsDays):
            raise TypeError("`sessions_days` must be an instance of SessionsDays")
        self._sessions_days = config.sessions_days
        if not isinstance(config.sessions_hours, SessionsHours):
            raise TypeError("`sessions_hours` must be an instance of SessionsHours")
        self._sessions_hours = config.sessions_hours
        self._latitude = self._validate_coordinate(config.latitude, "latitude", 90.0)
        self._longitude = self._validate_coordinate(
            config.longitude, "longitude", 180.0
        )

    @staticmethod
    def _validate_str(value: Any, field_name: str) -> str:
        if not isinstance(value, str) or len(value.strip()) == 0:
            raise ValueError(f"`{field_name}` must be a non-empty string")
        return value.strip()

    @staticmethod
    def _validate_coordinate(value: Any, field_name: str, limit: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"`{field_name}` must be a number")
        if not -limit <= value <= limit:
            raise ValueError(f"`{field_name}` must be between {-limit} and {limit}")
        return float(value)

    @property
    def market_id(self) -> str:
        """Return the market identifier."""
        return self._market_id

    @property
    def name(self) -> str:
        """Return the market display name."""
        return self._name

    @property
    def city(self) -> str:
        """Return the city the market is displayed in."""
        return self._city

    @property
    def sessions_days(self) -> SessionsDays:
        """Return the trading days for this market."""
        return self._sessions_days

    @property
    def sessions_hours(self) -> SessionsHours:
        """Return the trading session for this market."""
        return self._sessions_hours

    @property
    def latitude(self) -> float:
        """Return the display latitude."""
        return self._latitude

    @property
    def longitude(self) -> float:
        """Return the display longitude."""
        return self._longitude

    @property
    def timezone(self) -> str:
        """Return the IANA time zone of the session."""
        return self._sessions_hours.timezone

    @property
    def is_overnight(self) -> bool:
        """Return whether the session spans midnight."""
        return self._sessions_hours.overnight

    @property
    def open_minutes(self) -> int:
        """Return the zone-local opening time as minutes after midnight."""
        return self._sessions_hours.regular.open_minutes

    @property
    def close_minutes(self) -> int:
        """Return the zone-local closing time as minutes after midnight."""
        return self._sessions_hours.regular.close_minutes

    @property
    def trading_days(self) -> FrozenSet[int]:
        """Return the Sunday-first weekday indices the session trades on."""
        return self._sessions_days.trading_days()

    def __repr__(self) -> str:
        return f"MarketSchedule({self._market_id!r})"

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "id": self.market_id,
            "name": self.name,
            "city": self.city,
            "timezone": self.timezone,
            "sessions_days": self.sessions_days.to_json(),
            "sessions_hours": self.sessions_hours.regular.to_json(),
            "latitude": self.latitude,
            "longitude": self.longitude,
        }

    @staticmethod
    def _extract_hours(entry: Dict[str, Any], market_id: str) -> Hours:
        """Extracts and validates the trading session of a roster entry."""
        sessions = entry.get("sessions_hours")
        if sessions is None:
            raise ValueError(f"The sessions hours of '{market_id}' are not defined")
        if not isinstance(sessions, dict):
            raise ValueError(
                f"The sessions hours of '{market_id}' are invalid: '{sessions}'"
            )
        regular = sessions.get("regular")
        if not isinstance(regular, dict):
            raise ValueError(f"The regular session of '{market_id}' is not defined")
        return Hours(
            regular.get("open"),
            regular.get("close"),
            overnight=sessions.get("overnight", False),
        )

    @staticmethod
    def from_parameter(entry: Any, weekdays: List[str]) -> MarketSchedule:
        """Build and validate a :class:`MarketSchedule` from a roster dictionary."""
        if not isinstance(entry, dict):
            raise ValueError(f"Market entry is invalid: {entry}")
        market_id = entry.get("id")
        if not isinstance(market_id, str) or len(market_id.strip()) == 0:
            raise ValueError(f"Market id is invalid: '{market_id}'")
        market_id = market_id.strip().lower()
        timezone = entry.get("timezone")
        if timezone is None:
            raise ValueError(f"Timezone of '{market_id}' is not defined")
        if not isinstance(timezone, str):
            raise ValueError(f"Timezone of '{market_id}' is invalid: '{timezone}'")
        sessions_days = entry.get("sessions_days")
        if sessions_days is None:
            raise ValueError(f"The sessions days of '{market_id}' are not defined")
        return MarketSchedule(
            MarketConfig(
                market_id=market_id,
                name=entry.get("name"),
                city=entry.get("city"),
                sessions_days=SessionsDays(sessions_days, weekdays),
                sessions_hours=SessionsHours(
                    MarketSchedule._extract_hours(entry, market_id), timezone
                ),
                latitude=entry.get("latitude"),
                longitude=entry.get("longitude"),
            )
        )

    @staticmethod
    def from_parameters(entries: Any, weekdays: List[str]) -> List[MarketSchedule]:
        """Build the ordered market roster, rejecting empty rosters and duplicated ids."""
        if entries is None:
            raise ValueError("Parameter 'markets' is not defined")
        if not isinstance(entries, list):
            raise ValueError(f"Parameter 'markets' is invalid: {entries}")
        if len(entries) == 0:
            raise ValueError("Parameter 'markets' is empty")
        roster: List[MarketSchedule] = []
        seen: Set[str] = set()
        for entry in entries:
            schedule = MarketSchedule.from_parameter(entry, weekdays)
            if schedule.market_id in seen:
                raise ValueError(
                    f"Parameter 'markets' has duplicated items: {schedule.market_id}"
                )
            seen.add(schedule.market_id)
            roster.append(schedule)
        return roster
