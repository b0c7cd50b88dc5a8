from __future__ import annotations

from datetime import timedelta
from typing import Callable, Iterable, Optional

from ..common.colors import happy_color
from ..core.constants import GAP_THRESHOLD_DAYS
from ..core.exceptions import UnregisteredPartyError
from .model import BookingInterval, ChartPoint, ChartSeries


class HistoryBuilder:
    """Collects historical booking hours into one chart series per parent.

    Every parent must be registered up front; points for anyone else are a
    programming error and fail fast instead of creating a stray series.
    """

    def __init__(self, parents: Iterable[tuple[int, str]]):
        self._labels: dict[int, str] = {}
        self._series: dict[int, ChartSeries] = {}
        for user_id, display_name in parents:
            self._labels[int(user_id)] = display_name
            self._series[int(user_id)] = ChartSeries()

    def series_for(self, owner_id: int) -> ChartSeries:
        try:
            return self._series[owner_id]
        except KeyError:
            raise UnregisteredPartyError(f"No history series registered for user {owner_id}") from None

    def add(self, interval: BookingInterval) -> None:
        # same-day points stay separate; ordering is settled in finish()
        point = ChartPoint(x=interval.start.date(), y=interval.duration)
        self.series_for(interval.owner_id).add_point(point)

    def finish(
        self,
        *,
        color_factory: Optional[Callable[[], str]] = None,
        threshold_days: int = GAP_THRESHOLD_DAYS,
        legacy_year_day: bool = False,
    ) -> dict[int, ChartSeries]:
        """Apply chart display settings, then span gaps in every series."""

        color_factory = color_factory or happy_color
        for owner_id, series in self._series.items():
            series.configure_as_historical_hours(
                label=self._labels[owner_id],
                color=color_factory(),
                visible=False,
                baseline=0.0,
            )
            series.points = span_gaps(series.points, threshold_days=threshold_days, legacy_year_day=legacy_year_day)
        return self._series


def _day_delta(prev: ChartPoint, cur: ChartPoint, *, legacy_year_day: bool) -> int:
    if legacy_year_day:
        # day-of-year difference: goes negative across New Year
        return cur.x.timetuple().tm_yday - prev.x.timetuple().tm_yday
    return (cur.x - prev.x).days


def span_gaps(
    points: list[ChartPoint],
    *,
    threshold_days: int = GAP_THRESHOLD_DAYS,
    legacy_year_day: bool = False,
) -> list[ChartPoint]:
    """Insert zero points midway across gaps longer than ``threshold_days``.

    Keeps a line chart from drawing a slope across weeks with no bookings.
    Returns a new list sorted by date; duplicate dates are kept.
    """

    ordered = sorted(points, key=lambda p: p.x)
    zeros: list[ChartPoint] = []
    for prev, cur in zip(ordered, ordered[1:]):
        delta = _day_delta(prev, cur, legacy_year_day=legacy_year_day)
        if delta > threshold_days:
            zeros.append(ChartPoint(x=prev.x + timedelta(days=delta // 2), y=0.0))

    return sorted(ordered + zeros, key=lambda p: p.x)
