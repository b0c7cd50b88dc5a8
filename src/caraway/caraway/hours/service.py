from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..bookings.repository import BookingRepository
from ..core.constants import PERIOD_LENGTH
from ..core.exceptions import NotFoundError
from ..donations.service import DonationService
from ..families.model import Family
from ..families.repository import FamilyRepository
from .aggregator import WeeklyTotals
from .classifier import IntervalKind, classify_interval
from .goals import hours_goal_for
from .history import HistoryBuilder
from .model import FamilyData
from .period import resolve_period

logger = logging.getLogger(__name__)


class FamilyDataService:
    """Builds a family's dashboard figures relative to a reference ``today``.

    One booking fetch covers the whole reporting window; each booking is
    classified once and lands either in this week's totals or in its
    parent's history series.
    """

    def __init__(
        self,
        bookings: BookingRepository,
        families: FamilyRepository,
        donations: Optional[DonationService] = None,
        *,
        period_length: int = PERIOD_LENGTH,
        color_factory: Optional[Callable[[], str]] = None,
        legacy_year_day: bool = False,
    ):
        self._bookings = bookings
        self._families = families
        self._donations = donations
        self._period_length = int(period_length)
        self._color_factory = color_factory
        self._legacy_year_day = legacy_year_day

    def build_for_family(self, family_id: int, *, today: datetime) -> FamilyData:
        family = self._families.get_with_parents(int(family_id))
        if not family:
            raise NotFoundError(f"Family {family_id} does not exist")
        return self.build(family, today=today)

    def build(self, family: Family, *, today: datetime) -> FamilyData:
        history = HistoryBuilder((p.user_id, p.display_name) for p in family.parents)
        window = resolve_period(today, months=self._period_length)

        try:
            bookings = self._bookings.get_family_bookings(
                family_id=family.family_id,
                start=window.history_start,
                end=window.week_end,
            )
        except Exception:
            logger.error("Error getting hours data for family %s", family.family_id, exc_info=True)
            raise

        totals = WeeklyTotals()
        for booking in bookings:
            interval = booking.to_interval()
            kind = classify_interval(interval, today=today, week_start=window.week_start)
            if kind == IntervalKind.HISTORICAL:
                history.add(interval)
            else:
                totals.add(kind, interval)

        net = 0.0
        if self._donations:
            net = self._donations.net_for_family(
                family_id=family.family_id,
                start=window.week_start,
                end=window.week_end,
            )

        return FamilyData(
            family_id=family.family_id,
            hours_goal=hours_goal_for(family.children),
            hours_booked=totals.hours_booked,
            hours_done=totals.hours_done,
            net_adjustment=net,
            history=history.finish(color_factory=self._color_factory, legacy_year_day=self._legacy_year_day),
            period_start=window.history_start,
            period_end=window.history_end,
        )
