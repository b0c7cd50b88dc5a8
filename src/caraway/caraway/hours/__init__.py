"""Weekly hours accounting and history charting for family dashboards."""

from .aggregator import WeeklyTotals, truncate_hours
from .classifier import IntervalKind, classify_interval
from .history import HistoryBuilder, span_gaps
from .model import BookingInterval, ChartPoint, ChartSeries, FamilyData, ReportingWindow
from .period import resolve_period

__all__ = [
    "BookingInterval",
    "ChartPoint",
    "ChartSeries",
    "FamilyData",
    "HistoryBuilder",
    "IntervalKind",
    "ReportingWindow",
    "WeeklyTotals",
    "classify_interval",
    "resolve_period",
    "span_gaps",
    "truncate_hours",
]
