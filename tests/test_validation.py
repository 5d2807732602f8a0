"""
tests/test_validation.py

Validity filter and timestamp parsing.
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from unwrapped_stats.models.history import CanonicalRecord
from unwrapped_stats.validation import is_valid, parse_end_time, validate_records

UTC = timezone.utc


def _record(**overrides) -> CanonicalRecord:
    fields = {
        "end_time": "2023-01-15T10:00:00Z",
        "artist_name": "Artist",
        "track_name": "Song",
        "ms_played": 1000,
    }
    fields.update(overrides)
    return CanonicalRecord(**fields)


# ---------------------------------------------------------------------------
# parse_end_time
# ---------------------------------------------------------------------------


def test_parse_iso_with_z_suffix():
    assert parse_end_time("2023-01-15T10:00:00Z", UTC) == datetime(2023, 1, 15, 10, 0, tzinfo=UTC)


def test_parse_legacy_format_as_local_wall_clock():
    tz = ZoneInfo("Europe/Berlin")
    parsed = parse_end_time("2023-02-01 09:00", tz)
    assert (parsed.hour, parsed.minute) == (9, 0)
    assert parsed.utcoffset().total_seconds() == 3600


def test_aware_timestamp_is_converted_to_analysis_timezone():
    parsed = parse_end_time("2023-01-15T23:30:00Z", ZoneInfo("America/New_York"))
    assert (parsed.day, parsed.hour, parsed.minute) == (15, 18, 30)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2023-13-45", "15/01/2023 10:00"])
def test_unparseable_timestamps_return_none(value):
    assert parse_end_time(value, UTC) is None


# ---------------------------------------------------------------------------
# is_valid
# ---------------------------------------------------------------------------


def test_accepts_complete_record():
    assert is_valid(_record(), UTC) is True


@pytest.mark.parametrize("ms", [0, -1, None])
def test_rejects_non_positive_or_missing_play_time(ms):
    assert is_valid(_record(ms_played=ms), UTC) is False


@pytest.mark.parametrize("field", ["artist_name", "track_name", "end_time"])
@pytest.mark.parametrize("value", [None, ""])
def test_rejects_missing_or_empty_fields(field, value):
    assert is_valid(_record(**{field: value}), UTC) is False


def test_rejects_unparseable_end_time():
    assert is_valid(_record(end_time="yesterday"), UTC) is False


# ---------------------------------------------------------------------------
# validate_records
# ---------------------------------------------------------------------------


def test_validate_records_keeps_input_order_and_drops_invalid():
    records = [
        _record(track_name="first"),
        _record(ms_played=0),
        _record(track_name="second"),
        _record(end_time="garbage"),
        _record(track_name="third"),
    ]
    validated = validate_records(records, UTC)

    assert isinstance(validated, tuple)
    assert [r.track_name for r in validated] == ["first", "second", "third"]
    assert validated[0].played_at == datetime(2023, 1, 15, 10, 0, tzinfo=UTC)


def test_validate_records_empty():
    assert validate_records([], UTC) == ()
