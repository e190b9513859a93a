"""Central configuration manager.

This module handles the loading of static and environment-driven parameters, most notably
the roster of tracked markets. The roster defaults to the built-in list below and can be
replaced by a JSON file whose path is given through the ``MARKETS_FILEPATH`` variable.
Every roster entry is validated into a :class:`MarketSchedule` at load time, so a
malformed schedule or unknown time zone fails here rather than while evaluating.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from src.utils.exchange.market_schedule import MarketSchedule
from src.utils.io.json_manager import JsonManager
from src.utils.io.logger import Logger

_WEEKDAYS_MON_FRI = {
    "sunday": False,
    "monday": True,
    "tuesday": True,
    "wednesday": True,
    "thursday": True,
    "friday": True,
    "saturday": False,
}

_WEEKDAYS_SUN_FRI = {**_WEEKDAYS_MON_FRI, "sunday": True}


class ParameterLoader:
    """Centralized configuration manager for the market sessions engine."""

    _ENV_FILEPATH = ".env"

    def __init__(self, markets_filepath: Optional[str] = None):
        self.env_filepath = Path(ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._markets_filepath = markets_filepath or os.getenv("MARKETS_FILEPATH")
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        self._markets: List[MarketSchedule] = MarketSchedule.from_parameters(
            self.get("markets"), self.get("weekdays")
        )

    def _load_markets(self) -> Any:
        """Read the roster override file, if one is configured."""
        if not self._markets_filepath or not self._markets_filepath.strip():
            return None
        markets = JsonManager.load_list(self._markets_filepath, key="markets")
        if markets is None:
            raise ValueError(
                f"Markets file could not be loaded: {self._markets_filepath}"
            )
        Logger.info(f"Loaded {len(markets)} markets from {self._markets_filepath}")
        return markets

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging static and dynamic values."""
        constant_params = {
            "markets": [
                {
                    "id": "nyse",
                    "name": "New York",
                    "city": "New York",
                    "timezone": "America/New_York",
                    "sessions_days": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {
                        "regular": {"open": "09:30", "close": "16:00"},
                    },
                    "latitude": 40.7128,
                    "longitude": -74.0060,
                },
                {
                    "id": "lse",
                    "name": "London",
                    "city": "London",
                    "timezone": "Europe/London",
                    "sessions_days": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {
                        "regular": {"open": "08:00", "close": "16:30"},
                    },
                    "latitude": 51.5074,
                    "longitude": -0.1278,
                },
                {
                    "id": "tse",
                    "name": "Tokyo",
                    "city": "Tokyo",
                    "timezone": "Asia/Tokyo",
                    "sessions_days": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {
                        "regular": {"open": "09:00", "close": "15:00"},
                    },
                    "latitude": 35.6762,
                    "longitude": 139.6503,
                },
                {
                    "id": "cme",
                    "name": "CME Futures",
                    "city": "Chicago",
                    "timezone": "America/Chicago",
                    "sessions_days": _WEEKDAYS_SUN_FRI,
                    "sessions_hours": {
                        "regular": {"open": "17:00", "close": "16:00"},
                        "overnight": True,
                    },
                    "latitude": 41.8781,
                    "longitude": -87.6298,
                },
                {
                    "id": "comex",
                    "name": "COMEX Gold",
                    "city": "New York",
                    "timezone": "America/New_York",
                    "sessions_days": _WEEKDAYS_SUN_FRI,
                    "sessions_hours": {
                        "regular": {"open": "18:00", "close": "17:00"},
                        "overnight": True,
                    },
                    "latitude": 40.7128,
                    "longitude": -74.0060,
                },
            ],
            "weekdays": [
                "sunday",
                "monday",
                "tuesday",
                "wednesday",
                "thursday",
                "friday",
                "saturday",
            ],
        }
        env_params = {
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "markets_filepath": self._markets_filepath,
        }
        overrides: Dict[str, Any] = {}
        markets = self._load_markets()
        if markets is not None:
            overrides["markets"] = markets
        return {**constant_params, **env_params, **overrides}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def markets(self) -> List[MarketSchedule]:
        """Return the validated market roster in configuration order."""
        return list(self._markets)

    def market(self, market_id: str) -> MarketSchedule:
        """Return a specific market by id."""
        wanted = market_id.strip().lower()
        for schedule in self._markets:
            if schedule.market_id == wanted:
                return schedule
        raise ValueError(f"'{market_id}' is not defined in parameter 'markets'")
