"""Chart-ready aggregate views over validated streaming records"""
from typing import Dict, Sequence

from unwrapped_stats.models.history import ValidatedRecord
from unwrapped_stats.models.views import AggregateView
from unwrapped_stats.utils.rounding import ms_to_hours, ms_to_minutes

MONTH_ABBR = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
DAY_ABBR = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')
RANKABLE_FIELDS = ('artist_name', 'track_name')

def _month_label(key: str) -> str:
    """'2023-01' -> 'Jan 2023'"""
    year, month = key.split('-')
    return f"{MONTH_ABBR[int(month) - 1]} {year}"

def listening_over_time(records: Sequence[ValidatedRecord]) -> AggregateView:
    """Hours played per calendar month, oldest month first"""
    monthly_ms: Dict[str, int] = {}
    for record in records:
        key = f"{record.played_at.year:04d}-{record.played_at.month:02d}"
        monthly_ms[key] = monthly_ms.get(key, 0) + record.ms_played

    months = sorted(monthly_ms)
    return AggregateView(
        labels=[_month_label(month) for month in months],
        data=[ms_to_hours(monthly_ms[month]) for month in months],
    )

def top_items(records: Sequence[ValidatedRecord], field: str, count: int) -> AggregateView:
    """
    Rank values of `field` by total play time.

    Ties keep the order in which values were first seen. Data is minutes
    rounded to 2 places.
    """
    if field not in RANKABLE_FIELDS:
        raise ValueError(f"Cannot rank by {field!r}, expected one of {RANKABLE_FIELDS}")

    totals: Dict[str, int] = {}
    for record in records:
        item = getattr(record, field)
        if item:
            totals[item] = totals.get(item, 0) + record.ms_played

    ranked = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)[:max(count, 0)]
    return AggregateView(
        labels=[label for label, _ in ranked],
        data=[ms_to_minutes(ms) for _, ms in ranked],
    )

def hourly_activity(records: Sequence[ValidatedRecord]) -> AggregateView:
    """Play counts per local hour of day"""
    counts = [0] * 24
    for record in records:
        counts[record.played_at.hour] += 1
    return AggregateView(labels=[f"{hour}:00" for hour in range(24)], data=counts)

def daily_activity(records: Sequence[ValidatedRecord]) -> AggregateView:
    """Play counts per day of week, Sunday first"""
    counts = [0] * 7
    for record in records:
        # isoweekday: Monday=1 .. Sunday=7
        counts[record.played_at.isoweekday() % 7] += 1
    return AggregateView(labels=list(DAY_ABBR), data=counts)
