"""School calendar conventions the parsing core depends on.

The weekday names, lunch markers, academic year and the AM/PM cutoff are tied
to one school's printed schedules. They are passed explicitly into every core
function as a frozen ScheduleConventions value so that tests (or a second
school) can use different ones side by side.
"""

from datetime import tzinfo
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)

LUNCH_MARKERS: tuple[str, ...] = ("A Lunch", "B Lunch")


class ScheduleConventions(BaseModel):
    """Immutable school-specific parsing constants."""

    model_config = ConfigDict(frozen=True)

    # Monday first; a column number is the index here and equals date.weekday()
    day_names: tuple[str, ...] = WEEKDAY_NAMES
    lunch_markers: tuple[str, ...] = LUNCH_MARKERS

    # Stream-mode: a later duplicate of this period wins when it follows this marker
    lunch_preferences: dict[int, str] = Field(
        default_factory=lambda: {3: "B Lunch", 4: "A Lunch"}
    )

    # Layout-mode: topmost copy wins for the first, second-topmost for the second
    top_lunch_period: int = 3
    second_lunch_period: int = 4

    # July-December belong to this year, January-June to the next one
    academic_year_start: int = 2025
    # Printed hours below this are afternoon hours
    pm_cutoff_hour: int = Field(default=7, ge=0, le=12)
    timezone: str | None = None

    max_columns: int = Field(default=5, ge=1, le=7)

    # Layout-mode geometry in PDF points
    layout_row_height: float = Field(default=12.0, gt=0)
    layout_row_tolerance: float = Field(default=3.0, ge=0)

    def year_for_month(self, month: int) -> int:
        """Calendar year of a month (1-12) within the academic year."""
        return self.academic_year_start if month >= 7 else self.academic_year_start + 1

    def normalize_hour(self, hour: int) -> int:
        """Convert a printed 12-hour clock hour to a 24-hour one."""
        return hour + 12 if hour < self.pm_cutoff_hour else hour

    def zone(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


DEFAULT_CONVENTIONS = ScheduleConventions()
