from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from ..common.datetime_utils import beginning_of_week, end_of_week
from ..core.constants import PERIOD_LENGTH
from .model import ReportingWindow

_SATURDAY = 5
_SUNDAY = 6


def shift_weekend(today: datetime) -> datetime:
    """Move a Saturday or Sunday forward to the following Monday.

    Weekend viewers see next week's figures. Only week boundaries use the
    shifted value; classification keeps the real ``today``.
    """

    if today.weekday() == _SATURDAY:
        return today + timedelta(days=2)
    if today.weekday() == _SUNDAY:
        return today + timedelta(days=1)
    return today


def resolve_period(today: datetime, *, months: int = PERIOD_LENGTH) -> ReportingWindow:
    """Week boundaries and history window for a dashboard viewed at ``today``.

    The history start steps back calendar months and clamps to the month
    end (Jun 30 minus 4 months is Feb 28), where the legacy service rolled
    over into the next month (Mar 2).
    """

    shifted = shift_weekend(today)
    week_end = end_of_week(shifted)
    return ReportingWindow(
        week_start=beginning_of_week(shifted),
        week_end=week_end,
        history_start=shifted - relativedelta(months=months),
        history_end=week_end,
    )
