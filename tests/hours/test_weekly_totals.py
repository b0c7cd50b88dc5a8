from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from src.caraway.caraway.hours.aggregator import WeeklyTotals, truncate_hours
from src.caraway.caraway.hours.classifier import IntervalKind, classify_interval
from src.caraway.caraway.hours.model import BookingInterval

WEEK_START = datetime(2025, 1, 13)
TODAY = datetime(2025, 1, 15, 12, 0)


def _interval(start: datetime, hours: float, modifier: float = 1.0) -> BookingInterval:
    return BookingInterval(owner_id=1, start=start, end=start + timedelta(hours=hours), modifier=modifier)


def test_before_week_start_is_historical():
    interval = _interval(datetime(2025, 1, 10, 9, 0), 2)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.HISTORICAL


def test_started_before_today_this_week_is_completed():
    interval = _interval(datetime(2025, 1, 14, 9, 0), 2)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.COMPLETED


def test_in_progress_block_counts_as_completed():
    interval = _interval(datetime(2025, 1, 15, 11, 0), 2)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.COMPLETED


def test_block_starting_at_week_start_is_completed():
    interval = _interval(WEEK_START, 1)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.COMPLETED


def test_block_ending_before_week_start_is_historical():
    interval = _interval(WEEK_START - timedelta(hours=2), 1)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.HISTORICAL


def test_block_starting_at_today_is_upcoming():
    interval = _interval(TODAY, 1)

    assert classify_interval(interval, today=TODAY, week_start=WEEK_START) == IntervalKind.UPCOMING


def test_weekend_view_of_next_week_is_all_upcoming():
    # Saturday viewer: week starts next Monday, later than the real today
    today = datetime(2025, 1, 18, 10, 0)
    interval = _interval(datetime(2025, 1, 21, 9, 0), 3)

    assert classify_interval(interval, today=today, week_start=datetime(2025, 1, 20)) == IntervalKind.UPCOMING


def test_duration_is_scaled_by_modifier():
    assert _interval(datetime(2025, 1, 14, 9, 0), 2, modifier=1.5).duration == 3.0
    assert _interval(datetime(2025, 1, 14, 9, 0), 2, modifier=-1).duration == -2.0


def test_malformed_interval_gives_negative_duration():
    interval = BookingInterval(owner_id=1, start=datetime(2025, 1, 14, 11, 0), end=datetime(2025, 1, 14, 9, 0))

    assert interval.duration == -2.0


def test_truncation_is_toward_zero():
    assert truncate_hours(12.3456) == 12.34
    assert truncate_hours(Decimal("12.349")) == 12.34
    assert truncate_hours(-1.239) == -1.23
    assert truncate_hours(0) == 0.0


def test_completed_counts_as_done_and_booked():
    totals = WeeklyTotals()
    totals.add(IntervalKind.COMPLETED, _interval(datetime(2025, 1, 14, 9, 0), 2))
    totals.add(IntervalKind.UPCOMING, _interval(datetime(2025, 1, 16, 9, 0), 3))

    assert totals.hours_done == 2.0
    assert totals.hours_booked == 5.0
    assert totals.hours_done <= totals.hours_booked


def test_thirds_of_an_hour_sum_to_whole_hour():
    totals = WeeklyTotals()
    for day in (14, 15, 16):
        totals.add(IntervalKind.UPCOMING, _interval(datetime(2025, 1, day, 9, 0), 1 / 3))

    assert totals.hours_booked == 1.0


def test_totals_truncate_not_round():
    totals = WeeklyTotals()
    # 7 minutes = 0.11666.. hours
    totals.add(IntervalKind.COMPLETED, BookingInterval(1, datetime(2025, 1, 14, 9, 0), datetime(2025, 1, 14, 9, 7)))

    assert totals.hours_done == 0.11
    assert totals.hours_booked == 0.11


def test_credit_modifier_reduces_booked_hours():
    totals = WeeklyTotals()
    totals.add(IntervalKind.UPCOMING, _interval(datetime(2025, 1, 16, 9, 0), 3))
    totals.add(IntervalKind.UPCOMING, _interval(datetime(2025, 1, 17, 9, 0), 1, modifier=-1))

    assert totals.hours_booked == 2.0


def test_historical_interval_is_rejected_by_totals():
    with pytest.raises(ValueError):
        WeeklyTotals().add(IntervalKind.HISTORICAL, _interval(datetime(2025, 1, 10, 9, 0), 1))
