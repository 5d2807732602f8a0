"""Domain models for streaming history records"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass(frozen=True)
class CanonicalRecord:
    """One play event after field-name reconciliation"""
    end_time: Optional[str]
    artist_name: Optional[str]
    track_name: Optional[str]
    ms_played: Optional[int]

@dataclass(frozen=True)
class ValidatedRecord:
    """A play event that passed validation, with its end time parsed"""
    end_time: str
    artist_name: str
    track_name: str
    ms_played: int
    played_at: datetime

@dataclass
class ListeningStats:
    """Statistics about user's listening history"""
    total_ms: int
    total_minutes: int
    total_hours: float
    play_count: int
    unique_artists: int
    unique_tracks: int
    first_listen: Optional[datetime]
    last_listen: Optional[datetime]
    activity_period_days: int
