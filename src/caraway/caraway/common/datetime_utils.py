from __future__ import annotations

from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def beginning_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def beginning_of_week(value: datetime) -> datetime:
    """Monday 00:00 of the week containing ``value``."""
    return beginning_of_day(value) - timedelta(days=value.weekday())


def end_of_week(value: datetime) -> datetime:
    """Sunday 23:59:59.999999 of the week containing ``value``."""
    return beginning_of_week(value) + timedelta(days=7) - timedelta(microseconds=1)


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)
