"""Application configuration and environment settings"""
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Ranking sizes
    TOP_ARTISTS_COUNT: int = Field(10, ge=0, description="Number of artists in the top artists view")
    TOP_TRACKS_COUNT: int = Field(10, ge=0, description="Number of tracks in the top tracks view")

    # Timezone used for month, hour and weekday buckets
    TIMEZONE: str = Field("UTC", description="IANA timezone name used for local-time bucketing")

    # Batch behaviour
    SKIP_INVALID_FILES: bool = Field(False, description="Skip unparseable files instead of aborting the batch")
    GENERATE_INSIGHTS: bool = Field(True, description="Attach listening persona and activity insights")

    # Input/Output directories with defaults
    INPUT_DIR: str = Field("/input", description="Directory containing streaming history exports")
    INPUT_GLOB: str = Field("*.json", description="Glob pattern selecting export files in INPUT_DIR")
    OUTPUT_DIR: str = Field("/output", description="Directory for output files")

    LOG_LEVEL: str = Field("INFO", description="Root log level for the runner")

    @field_validator("TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @property
    def tz(self) -> ZoneInfo:
        """Timezone object for TIMEZONE"""
        return ZoneInfo(self.TIMEZONE)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )

settings = Settings()
