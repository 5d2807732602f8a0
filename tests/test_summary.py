"""
tests/test_summary.py

Summary totals and their display formatting.
"""

from __future__ import annotations

from datetime import datetime, timezone

from unwrapped_stats.models.history import ListeningStats
from unwrapped_stats.summary import calculate_listening_stats, format_summary


def test_totals_and_distinct_counts(make_record):
    records = [
        make_record("A", "T1", 90_000, "2023-01-01T10:00:00Z"),
        make_record("A", "T2", 30_000, "2023-01-05T10:00:00Z"),
        make_record("B", "T1", 60_000, "2023-01-03T10:00:00Z"),
    ]
    stats = calculate_listening_stats(records)

    assert stats.play_count == 3
    assert stats.total_ms == 180_000
    assert stats.total_minutes == 3
    assert stats.total_hours == 0.1
    assert stats.unique_artists == 2
    assert stats.unique_tracks == 2
    assert stats.first_listen == datetime(2023, 1, 1, 10, 0, tzinfo=timezone.utc)
    assert stats.last_listen == datetime(2023, 1, 5, 10, 0, tzinfo=timezone.utc)
    assert stats.activity_period_days == 5


def test_hours_follow_rounded_minutes(make_record):
    # 89.5 minutes rounds to 90, so hours must read 1.5, not 1.49
    stats = calculate_listening_stats([make_record("A", "T", 5_370_000)])
    assert stats.total_minutes == 90
    assert stats.total_hours == 1.5


def test_empty_collection():
    stats = calculate_listening_stats([])
    assert stats.play_count == 0
    assert stats.total_minutes == 0
    assert stats.total_hours == 0.0
    assert stats.first_listen is None
    assert stats.activity_period_days == 0


def test_format_uses_thousands_separators():
    stats = ListeningStats(
        total_ms=4_440_000_000,
        total_minutes=74_000,
        total_hours=1233.3,
        play_count=12_345,
        unique_artists=1_024,
        unique_tracks=987,
        first_listen=None,
        last_listen=None,
        activity_period_days=0,
    )
    summary = format_summary(stats)

    assert summary.as_display() == {
        "Total plays": "12,345",
        "Total minutes": "74,000",
        "Total hours": "1,233.3",
        "Unique artists": "1,024",
        "Unique songs": "987",
    }
