from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import Union

from .classifier import IntervalKind
from .model import SECONDS_PER_HOUR, BookingInterval

_CENTS = Decimal("0.01")


def truncate_hours(value: Union[Decimal, float, int]) -> float:
    """Truncate toward zero at 2 decimals: 12.3456 -> 12.34, -1.239 -> -1.23."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(_CENTS, rounding=ROUND_DOWN))


@dataclass
class WeeklyTotals:
    """Running booked/done time for the current week.

    Sums exact weighted seconds and converts to hours once, so three
    20 minute blocks make 1.00 hour rather than 0.99.
    """

    booked_seconds: Decimal = Decimal(0)
    done_seconds: Decimal = Decimal(0)

    def add(self, kind: IntervalKind, interval: BookingInterval) -> None:
        seconds = interval.weighted_seconds
        if kind == IntervalKind.COMPLETED:
            # completed hours are still booked for the week
            self.done_seconds += seconds
            self.booked_seconds += seconds
        elif kind == IntervalKind.UPCOMING:
            self.booked_seconds += seconds
        else:
            raise ValueError(f"{kind.value} hours do not count toward the week")

    @property
    def hours_booked(self) -> float:
        return truncate_hours(self.booked_seconds / SECONDS_PER_HOUR)

    @property
    def hours_done(self) -> float:
        return truncate_hours(self.done_seconds / SECONDS_PER_HOUR)
