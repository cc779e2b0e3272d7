"""Date-triggered parameter changes.

Long unattended runs slow themselves down and plant more trees once the
calendar reaches certain years. A change only happens if the user has not
touched that parameter and it still holds the value the change expects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .config import RateParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Adjustment:
    """One scheduled change of a rate parameter.

    Attributes:
        year: Calendar year in which the change applies
        field: Name of the RateParams field
        expected: Value the field must hold for the change to apply
        value: New value
        notice: Message shown to the user once the change is applied
        clears_notice: Hide the current notice once the change is applied
    """

    year: int
    field: str
    expected: float
    value: float
    notice: str = ""
    clears_notice: bool = False


class ParameterSchedule:
    """Ordered list of adjustments checked once per simulated day."""

    def __init__(self, adjustments: Iterable[Adjustment] = ()):
        self.adjustments = list(adjustments)
        unknown = {a.field for a in self.adjustments} - set(RateParams.field_names())
        if unknown:
            raise ValueError(f"Unknown parameter(s) in schedule: {sorted(unknown)}")

    @classmethod
    def default(cls) -> ParameterSchedule:
        return cls([
            Adjustment(2045, "days_per_second", 1000, 100,
                       notice="Further slow-down and more trees in year 2055"),
            Adjustment(2055, "days_per_second", 100, 25, clears_notice=True),
            Adjustment(2055, "trees_per_month", 100, 1000, clears_notice=True),
        ])

    def apply(self, params: RateParams, on_date: date) -> list[Adjustment]:
        """
        Apply the adjustments due on `on_date`.

        Returns:
            Adjustments that changed a parameter
        """
        applied = []
        for adjustment in self.adjustments:
            if adjustment.year != on_date.year:
                continue
            if params.is_user_modified(adjustment.field):
                continue
            if getattr(params, adjustment.field) != adjustment.expected:
                continue
            params.set(adjustment.field, adjustment.value, by_user=False)
            applied.append(adjustment)
            logger.info(
                f"{on_date}: {adjustment.field} changed from {adjustment.expected} to {adjustment.value}"
            )
        return applied

    def __len__(self) -> int:
        return len(self.adjustments)
