"""Reconciles field names across streaming history export vintages"""
import math
from typing import Any, Iterable, List, Mapping, Optional

from unwrapped_stats.models.history import CanonicalRecord

# canonical field -> source keys, first present wins
FIELD_SOURCES = {
    'end_time': ('endTime', 'ts'),
    'artist_name': ('artistName', 'master_metadata_album_artist_name'),
    'track_name': ('trackName', 'master_metadata_track_name'),
    'ms_played': ('msPlayed', 'ms_played'),
}

def _first_present(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    # Falsy values (0, "", null) fall through to the next key
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return None

def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None

def _as_ms(value: Any) -> Optional[int]:
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None

def normalize_record(raw: Any) -> CanonicalRecord:
    """Map one raw export entry to a CanonicalRecord. Never raises."""
    if not isinstance(raw, Mapping):
        raw = {}
    return CanonicalRecord(
        end_time=_as_str(_first_present(raw, FIELD_SOURCES['end_time'])),
        artist_name=_as_str(_first_present(raw, FIELD_SOURCES['artist_name'])),
        track_name=_as_str(_first_present(raw, FIELD_SOURCES['track_name'])),
        ms_played=_as_ms(_first_present(raw, FIELD_SOURCES['ms_played'])),
    )

def normalize_records(raws: Iterable[Any]) -> List[CanonicalRecord]:
    return [normalize_record(raw) for raw in raws]
