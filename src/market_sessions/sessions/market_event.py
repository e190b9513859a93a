"""Event types produced by the next-event resolver and the global scheduler."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.utils.exchange.market_schedule import MarketSchedule

NO_EVENT_MS = math.inf


class EventKind(str, Enum):
    """Direction of a session transition."""

    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True)
class MarketEvent:
    """Next transition of a single market.

    ``milliseconds`` is :data:`NO_EVENT_MS` when no upcoming open could be resolved.
    """

    kind: EventKind
    milliseconds: float

    @property
    def resolvable(self) -> bool:
        """Return ``True`` if the event lies a finite, positive duration ahead."""
        return 0 < self.milliseconds < NO_EVENT_MS


@dataclass(frozen=True)
class NextEvent:
    """Soonest transition across the tracked markets."""

    market: MarketSchedule
    kind: EventKind
    milliseconds_until: int

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "market": self.market.market_id,
            "kind": self.kind.value,
            "milliseconds_until": self.milliseconds_until,
        }
