"""Rate parameters read by the simulation on every simulated day.

Values may come from free-form UI input, so everything is coerced: an invalid
rate counts as 0 and an invalid speed as 1 day per second.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30

DEFAULT_TREES_PER_MONTH = 0
DEFAULT_LIGHTNINGS_PER_MONTH = 0
DEFAULT_DAYS_PER_SECOND = 1.0


def coerce_rate(value: Any, default: int = 0) -> int:
    """Convert a monthly rate to a non-negative int, falling back to `default`."""
    try:
        rate = int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Invalid rate {value!r}, using {default}")
        return default
    if rate < 0:
        logger.warning(f"Negative rate {value!r}, using {default}")
        return default
    return rate


def coerce_speed(value: Any, default: float = DEFAULT_DAYS_PER_SECOND) -> float:
    """Convert a days-per-second speed to a positive finite float."""
    try:
        speed = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid speed {value!r}, using {default}")
        return default
    if not math.isfinite(speed) or speed <= 0:
        logger.warning(f"Speed must be positive, got {value!r}, using {default}")
        return default
    return speed


_COERCERS = {
    "trees_per_month": coerce_rate,
    "lightnings_per_month": coerce_rate,
    "days_per_second": coerce_speed,
}


@dataclass
class RateParams:
    """Mutable snapshot of the external controls.

    Attributes:
        trees_per_month: Expected number of tree spawns per 30 days
        lightnings_per_month: Expected number of lightning strikes per 30 days
        days_per_second: Simulated days per real second
        user_modified: Names of fields changed through `set()`; scheduled
            adjustments leave these alone
    """

    trees_per_month: int = DEFAULT_TREES_PER_MONTH
    lightnings_per_month: int = DEFAULT_LIGHTNINGS_PER_MONTH
    days_per_second: float = DEFAULT_DAYS_PER_SECOND
    user_modified: set[str] = field(default_factory=set, compare=False)

    def __post_init__(self) -> None:
        for name, coerce in _COERCERS.items():
            setattr(self, name, coerce(getattr(self, name)))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name in _COERCERS)

    def set(self, name: str, value: Any, *, by_user: bool = True) -> None:
        """
        Update one parameter.

        Args:
            name: One of the rate field names
            value: Raw value, coerced like the constructor arguments
            by_user: Record the field as modified by the user
        """
        if name not in _COERCERS:
            raise KeyError(f"Unknown parameter: {name}")
        setattr(self, name, _COERCERS[name](value))
        if by_user:
            self.user_modified.add(name)

    def is_user_modified(self, name: str) -> bool:
        return name in self.user_modified

    @property
    def trees_per_day(self) -> float:
        return self.trees_per_month / DAYS_PER_MONTH

    @property
    def lightnings_per_day(self) -> float:
        return self.lightnings_per_month / DAYS_PER_MONTH
