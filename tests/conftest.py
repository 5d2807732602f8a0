"""Shared fixtures for the unwrapped_stats test suite."""

from __future__ import annotations

import json
from datetime import timezone

import pytest

from unwrapped_stats.config import Settings
from unwrapped_stats.models.history import ValidatedRecord
from unwrapped_stats.pipeline import HistoryAnalyzer
from unwrapped_stats.validation import parse_end_time


@pytest.fixture()
def settings() -> Settings:
    """Deterministic settings, independent of the caller's environment."""
    return Settings(
        TOP_ARTISTS_COUNT=10,
        TOP_TRACKS_COUNT=10,
        TIMEZONE="UTC",
        SKIP_INVALID_FILES=False,
        GENERATE_INSIGHTS=True,
    )


@pytest.fixture()
def analyzer(settings: Settings) -> HistoryAnalyzer:
    return HistoryAnalyzer(settings)


@pytest.fixture()
def make_record():
    """Build a ValidatedRecord from an ISO timestamp, interpreted in UTC."""

    def _make(artist: str, track: str, ms: int, ts: str = "2023-01-15T10:00:00Z") -> ValidatedRecord:
        return ValidatedRecord(
            end_time=ts,
            artist_name=artist,
            track_name=track,
            ms_played=ms,
            played_at=parse_end_time(ts, timezone.utc),
        )

    return _make


def extended_entry(ts: str, artist: str, track: str, ms: int) -> dict:
    """An entry in the current extended-history export shape."""
    return {
        "ts": ts,
        "master_metadata_album_artist_name": artist,
        "master_metadata_track_name": track,
        "ms_played": ms,
        "platform": "android",
        "skipped": False,
    }


def legacy_entry(end_time: str, artist: str, track: str, ms: int) -> dict:
    """An entry in the legacy StreamingHistory export shape."""
    return {"endTime": end_time, "artistName": artist, "trackName": track, "msPlayed": ms}


def as_file(entries) -> str:
    return json.dumps(entries)
