"""Summary statistics over validated streaming records"""
from typing import Sequence

from unwrapped_stats.models.history import ListeningStats, ValidatedRecord
from unwrapped_stats.models.views import SummaryStats
from unwrapped_stats.utils.rounding import MS_PER_MINUTE, round_half_up

def calculate_listening_stats(records: Sequence[ValidatedRecord]) -> ListeningStats:
    """Calculate totals, distinct counts and the activity period"""
    total_ms = sum(record.ms_played for record in records)
    total_minutes = int(round_half_up(total_ms / MS_PER_MINUTE))
    # Hours come from the rounded minutes so both displayed values agree
    total_hours = round_half_up(total_minutes / 60, 1)

    first_listen = min((r.played_at for r in records), default=None)
    last_listen = max((r.played_at for r in records), default=None)
    activity_period_days = 0
    if first_listen is not None and last_listen is not None:
        activity_period_days = (last_listen - first_listen).days + 1

    return ListeningStats(
        total_ms=total_ms,
        total_minutes=total_minutes,
        total_hours=total_hours,
        play_count=len(records),
        unique_artists=len({r.artist_name for r in records if r.artist_name}),
        unique_tracks=len({r.track_name for r in records if r.track_name}),
        first_listen=first_listen,
        last_listen=last_listen,
        activity_period_days=activity_period_days,
    )

def format_summary(stats: ListeningStats) -> SummaryStats:
    """Render stats with thousands separators for display"""
    return SummaryStats(
        total_plays=f"{stats.play_count:,}",
        total_minutes=f"{stats.total_minutes:,}",
        total_hours=f"{stats.total_hours:,.1f}",
        unique_artists=f"{stats.unique_artists:,}",
        unique_tracks=f"{stats.unique_tracks:,}",
    )
