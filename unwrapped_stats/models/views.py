"""Response models handed to the presentation layer"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

class Outcome(str, Enum):
    """Terminal outcome of one pipeline run"""
    SUCCESS = "success"
    EMPTY_INPUT = "empty_input"
    NO_VALID_RECORDS = "no_valid_records"
    PARSE_ERROR = "parse_error"

class PipelineState(str, Enum):
    """Non-terminal analyzer states"""
    IDLE = "idle"
    PROCESSING = "processing"

class AggregateView(BaseModel):
    """A chart-ready series: labels[i] belongs to data[i]"""
    model_config = ConfigDict(frozen=True)

    labels: List[str] = Field(default_factory=list, description="Bucket or item labels")
    data: List[Union[int, float]] = Field(default_factory=list, description="Values aligned with labels")

class SummaryStats(BaseModel):
    """Display-formatted totals"""
    model_config = ConfigDict(frozen=True)

    total_plays: str = Field(description="Number of valid plays")
    total_minutes: str = Field(description="Total minutes played")
    total_hours: str = Field(description="Total hours played, derived from total minutes")
    unique_artists: str = Field(description="Distinct artist names")
    unique_tracks: str = Field(description="Distinct track names")

    def as_display(self) -> Dict[str, str]:
        """Summary keyed by its display caption"""
        return {
            'Total plays': self.total_plays,
            'Total minutes': self.total_minutes,
            'Total hours': self.total_hours,
            'Unique artists': self.unique_artists,
            'Unique songs': self.unique_tracks,
        }

class AnalysisResponse(BaseModel):
    """
    Result of analyzing one batch of streaming history files.

    Attributes:
        outcome: Terminal state of the run
        message: Human readable diagnostic, set for every non-success outcome
        summary: Formatted totals, only on success
        views: listeningOverTime, topArtists, topTracks, hourlyActivity, dailyActivity
        attributes: Extra context (record counts, activity period, persona, skipped files)
    """
    outcome: Outcome
    message: Optional[str] = None
    summary: Optional[SummaryStats] = None
    views: Dict[str, AggregateView] = {}
    attributes: Dict[str, Any] = {}

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS
