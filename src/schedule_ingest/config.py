"""Ingest configuration loaded from environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from schedule_ingest.conventions import ScheduleConventions


class IngestConfig(BaseSettings):
    """Ingest configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # School website (static HTML page listing one PDF per week)
    base_url: str = Field(
        default="https://ehs.lwsd.org",
        description="Base URL that relative PDF hrefs are resolved against",
    )
    schedule_page_url: str = Field(
        default="https://ehs.lwsd.org/students-and-families/daily-schedule",
        description="Page listing the weekly schedule PDFs",
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds for page and PDF requests",
    )

    # Paths
    download_dir: str = Field(
        default="downloads",
        description="Directory the weekly schedule PDFs are saved to",
    )
    database_url: str = Field(
        default="sqlite:///schedule.db",
        description="SQLAlchemy URL of the schedule store",
    )

    # Parsing
    extraction_mode: Literal["stream", "layout"] = Field(
        default="stream",
        description="Read PDFs as a text stream or as positioned fragments",
    )
    academic_year_start: int = Field(
        default=2025,
        description="Calendar year of the academic year's July-December months",
    )
    pm_cutoff_hour: int = Field(
        default=7,
        description="Printed hours below this are read as PM",
    )
    timezone: str | None = Field(
        default=None,
        description="IANA zone for entry datetimes, naive local time if unset",
    )
    layout_row_height: float = Field(
        default=12.0,
        description="Vertical distance in points from a period label to its time row",
    )
    layout_row_tolerance: float = Field(
        default=3.0,
        description="Allowed deviation in points when matching the time row",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for scheduled runs)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "SCHEDULE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def conventions(self) -> ScheduleConventions:
        """Build the parsing conventions these settings describe."""
        return ScheduleConventions(
            academic_year_start=self.academic_year_start,
            pm_cutoff_hour=self.pm_cutoff_hour,
            timezone=self.timezone,
            layout_row_height=self.layout_row_height,
            layout_row_tolerance=self.layout_row_tolerance,
        )


# Singleton pattern
_config: IngestConfig | None = None


def get_config() -> IngestConfig:
    """Get the ingest configuration singleton.

    Returns:
        IngestConfig: Ingest configuration instance
    """
    global _config
    if _config is None:
        _config = IngestConfig()
    return _config
