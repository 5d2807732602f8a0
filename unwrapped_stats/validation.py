"""Validity filter for canonical streaming records"""
import logging
from datetime import datetime, tzinfo
from typing import Iterable, Optional, Tuple

from unwrapped_stats.models.history import CanonicalRecord, ValidatedRecord

logger = logging.getLogger(__name__)

# Older "StreamingHistory*.json" exports, e.g. "2023-02-01 09:00"
LEGACY_FORMATS = ('%Y-%m-%d %H:%M', '%Y-%m-%d %H:%M:%S')

def parse_end_time(value: Optional[str], tz: tzinfo) -> Optional[datetime]:
    """
    Parse an export timestamp into an aware datetime in `tz`.

    Aware timestamps are converted to `tz`; naive ones are taken as wall-clock
    time in `tz`. Returns None for anything that does not parse.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'

    dt: Optional[datetime] = None
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        for fmt in LEGACY_FORMATS:
            try:
                dt = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if dt is None:
        return None

    try:
        if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
            return dt.replace(tzinfo=tz)
        return dt.astimezone(tz)
    except (OverflowError, ValueError):
        return None

def _validate(record: CanonicalRecord, tz: tzinfo) -> Optional[ValidatedRecord]:
    if record.ms_played is None or record.ms_played <= 0:
        return None
    if not record.track_name or not record.artist_name or not record.end_time:
        return None
    played_at = parse_end_time(record.end_time, tz)
    if played_at is None:
        return None
    return ValidatedRecord(
        end_time=record.end_time,
        artist_name=record.artist_name,
        track_name=record.track_name,
        ms_played=record.ms_played,
        played_at=played_at,
    )

def is_valid(record: CanonicalRecord, tz: tzinfo) -> bool:
    """True if the record has positive play time, both names and a parseable end time"""
    return _validate(record, tz) is not None

def validate_records(records: Iterable[CanonicalRecord], tz: tzinfo) -> Tuple[ValidatedRecord, ...]:
    """Keep usable records in input order"""
    valid = []
    rejected = 0
    for record in records:
        validated = _validate(record, tz)
        if validated is None:
            rejected += 1
            logger.debug(f"Rejected record: {record}")
            continue
        valid.append(validated)
    if rejected:
        logger.info(f"Validity filter rejected {rejected} record(s), kept {len(valid)}")
    return tuple(valid)
