"""Streaming history analysis: parse, normalize, filter, aggregate"""
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from unwrapped_stats.aggregation import (
    daily_activity,
    hourly_activity,
    listening_over_time,
    top_items,
)
from unwrapped_stats.config import Settings
from unwrapped_stats.insights import listening_persona
from unwrapped_stats.models.views import AnalysisResponse, Outcome, PipelineState
from unwrapped_stats.normalizer import normalize_records
from unwrapped_stats.summary import calculate_listening_stats, format_summary
from unwrapped_stats.validation import validate_records

logger = logging.getLogger(__name__)

FileContent = Union[str, bytes]
FileSource = Callable[[], Awaitable[FileContent]]

OUTCOME_MESSAGES = {
    Outcome.EMPTY_INPUT: "No streaming data found in the selected files.",
    Outcome.NO_VALID_RECORDS: (
        "No valid streaming history could be found in your files. "
        "Please ensure the files are correct and contain playable tracks."
    ),
    Outcome.PARSE_ERROR: "Error reading or parsing files. Please make sure they are valid JSON files.",
}

# EMPTY_INPUT with no files at all
NO_FILES_MESSAGE = "Please select your Spotify JSON files first."

class BatchParseError(Exception):
    """Raised when one file of a batch cannot be decoded or parsed"""

    def __init__(self, index: int, cause: Exception):
        super().__init__(f"File #{index} could not be parsed: {cause}")
        self.index = index
        self.cause = cause

def decode_content(content: FileContent) -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM"""
    if isinstance(content, bytes):
        return content.decode('utf-8-sig')
    return content.lstrip('\ufeff')

class HistoryAnalyzer:
    """Runs the analysis pipeline over a batch of streaming history files"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.state: Union[PipelineState, Outcome] = PipelineState.IDLE

    def analyze(self, contents: Iterable[FileContent], skip_invalid_files: Optional[bool] = None) -> AnalysisResponse:
        """Analyze already-read file contents, in order"""
        skip = self.settings.SKIP_INVALID_FILES if skip_invalid_files is None else skip_invalid_files
        self.state = PipelineState.PROCESSING
        raw_records: List[Any] = []
        skipped: List[int] = []
        try:
            file_count = 0
            for index, content in enumerate(contents):
                file_count += 1
                self._accumulate(index, content, raw_records, skipped, skip)
        except BatchParseError as e:
            return self._parse_failure(e)
        return self._finish(raw_records, skipped, file_count)

    async def analyze_async(self, sources: Iterable[FileSource], skip_invalid_files: Optional[bool] = None) -> AnalysisResponse:
        """
        Analyze files supplied by async readers.

        Each source is awaited only after the previous one has been parsed, so
        records accumulate in source order and at most one file is in flight.
        """
        skip = self.settings.SKIP_INVALID_FILES if skip_invalid_files is None else skip_invalid_files
        self.state = PipelineState.PROCESSING
        raw_records: List[Any] = []
        skipped: List[int] = []
        try:
            file_count = 0
            for index, source in enumerate(sources):
                file_count += 1
                try:
                    content = await source()
                except OSError as e:
                    self._handle_bad_file(index, e, skipped, skip)
                    continue
                self._accumulate(index, content, raw_records, skipped, skip)
        except BatchParseError as e:
            return self._parse_failure(e)
        return self._finish(raw_records, skipped, file_count)

    def _accumulate(self, index: int, content: FileContent, raw_records: List[Any], skipped: List[int], skip: bool) -> None:
        try:
            parsed = json.loads(decode_content(content))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            self._handle_bad_file(index, e, skipped, skip)
            return
        if isinstance(parsed, list):
            raw_records.extend(parsed)
            logger.info(f"File #{index}: {len(parsed)} raw record(s)")
        else:
            logger.info(f"File #{index}: top-level {type(parsed).__name__} is not an array, ignoring")

    def _handle_bad_file(self, index: int, error: Exception, skipped: List[int], skip: bool) -> None:
        if not skip:
            raise BatchParseError(index, error)
        logger.warning(f"Skipping file #{index}: {error}")
        skipped.append(index)

    def _parse_failure(self, error: BatchParseError) -> AnalysisResponse:
        logger.error(f"Aborting batch: {error}")
        return self._respond(Outcome.PARSE_ERROR, attributes={'error': str(error), 'failed_file': error.index})

    def _respond(self, outcome: Outcome, **kwargs) -> AnalysisResponse:
        self.state = outcome
        return AnalysisResponse(outcome=outcome, message=OUTCOME_MESSAGES.get(outcome), **kwargs)

    def _finish(self, raw_records: List[Any], skipped: List[int], file_count: int) -> AnalysisResponse:
        attributes: Dict[str, Any] = {'file_count': file_count}
        if skipped:
            attributes['skipped_files'] = skipped

        if not raw_records:
            if file_count == 0:
                attributes['diagnostic'] = NO_FILES_MESSAGE
            logger.info("No raw records in batch")
            return self._respond(Outcome.EMPTY_INPUT, attributes=attributes)

        records = validate_records(normalize_records(raw_records), self.settings.tz)
        attributes['record_counts'] = {
            'raw': len(raw_records),
            'valid': len(records),
            'rejected': len(raw_records) - len(records),
        }
        if not records:
            logger.info(f"None of {len(raw_records)} raw record(s) are usable")
            return self._respond(Outcome.NO_VALID_RECORDS, attributes=attributes)

        stats = calculate_listening_stats(records)
        views = {
            'listeningOverTime': listening_over_time(records),
            'topArtists': top_items(records, 'artist_name', self.settings.TOP_ARTISTS_COUNT),
            'topTracks': top_items(records, 'track_name', self.settings.TOP_TRACKS_COUNT),
            'hourlyActivity': hourly_activity(records),
            'dailyActivity': daily_activity(records),
        }

        if self.settings.GENERATE_INSIGHTS:
            attributes['activity'] = {
                'first_listen': stats.first_listen,
                'last_listen': stats.last_listen,
                'activity_period_days': stats.activity_period_days,
            }
            attributes['listening_persona'] = listening_persona(views['hourlyActivity'])
        else:
            logger.info("GENERATE_INSIGHTS is false. Skipping insight generation.")

        logger.info(f"Analyzed {stats.play_count} play(s) across {len(views['listeningOverTime'].labels)} month(s)")
        return self._respond(Outcome.SUCCESS, summary=format_summary(stats), views=views, attributes=attributes)
