from __future__ import annotations

from datetime import datetime
from enum import Enum

from .model import BookingInterval


class IntervalKind(str, Enum):
    """Where a booking's hours are counted."""

    HISTORICAL = "historical"  # before this week: chart only
    COMPLETED = "completed"  # this week, already started: done + booked
    UPCOMING = "upcoming"  # this week, not started yet: booked only


def classify_interval(interval: BookingInterval, *, today: datetime, week_start: datetime) -> IntervalKind:
    """Classify against the unshifted ``today`` and the (possibly shifted) week start."""
    if interval.start < week_start:
        return IntervalKind.HISTORICAL
    if interval.start < today and interval.end > week_start:
        return IntervalKind.COMPLETED
    return IntervalKind.UPCOMING
