from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

SECONDS_PER_HOUR = Decimal(3600)


@dataclass(frozen=True)
class BookingInterval:
    """A booked time block, already fetched, as seen by the accounting core."""

    owner_id: int
    start: datetime
    end: datetime
    modifier: float = 1.0

    @property
    def weighted_seconds(self) -> Decimal:
        """Exact length in seconds scaled by the modifier.

        Negative when the modifier is negative or the interval is malformed.
        """

        span = self.end - self.start
        seconds = Decimal(span.days * 86400 + span.seconds) + Decimal(span.microseconds) / Decimal(1_000_000)
        return seconds * Decimal(str(self.modifier))

    @property
    def duration(self) -> float:
        """Hours, scaled by the modifier."""
        return float(self.weighted_seconds / SECONDS_PER_HOUR)


@dataclass(frozen=True)
class ChartPoint:
    x: date
    y: float


@dataclass
class ChartSeries:
    """One parent's historical hours as a chart dataset."""

    label: str = ""
    color: str = ""
    visible: bool = True
    baseline: float = 0.0
    points: list[ChartPoint] = field(default_factory=list)

    def add_point(self, point: ChartPoint) -> None:
        self.points.append(point)

    def configure_as_historical_hours(self, *, label: str, color: str, visible: bool, baseline: float) -> None:
        self.label = label
        self.color = color
        self.visible = visible
        self.baseline = baseline

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "color": self.color,
            "visible": self.visible,
            "baseline": self.baseline,
            "data": [{"x": p.x.isoformat(), "y": p.y} for p in self.points],
        }


@dataclass(frozen=True)
class ReportingWindow:
    week_start: datetime
    week_end: datetime
    history_start: datetime
    history_end: datetime


@dataclass
class FamilyData:
    """Dashboard figures for one family, built fresh per request."""

    family_id: int
    hours_goal: float = 0.0
    hours_booked: float = 0.0
    hours_done: float = 0.0
    net_adjustment: float = 0.0
    # keyed by parent user_id
    history: dict[int, ChartSeries] = field(default_factory=dict)
    period_start: datetime | None = None
    period_end: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "familyID": self.family_id,
            "hoursGoal": self.hours_goal,
            "hoursBooked": self.hours_booked,
            "hoursDone": self.hours_done,
            "donatedHours": self.net_adjustment,
            "history": {str(uid): series.to_dict() for uid, series in self.history.items()},
            "startOfPeriod": self.period_start.isoformat() if self.period_start else None,
            "endOfPeriod": self.period_end.isoformat() if self.period_end else None,
        }
