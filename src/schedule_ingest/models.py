"""Pydantic models for schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
"""

import re
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class TimeOfDay(BaseModel):
    """A time as printed on the schedule: 12-hour clock, no AM/PM marker."""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """Parse "h:mm" or "hh:mm" (e.g. "1:45", "10:05").

        Raises:
            ValueError: If the text is not a clock time.
        """
        match = _TIME_RE.match(text)
        if match is None:
            raise ValueError(f"Not a clock time: {text!r}")
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute:02d}"


class StreamEvidence(BaseModel):
    """Where a stream-mode occurrence was found in the extracted text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stream"] = "stream"
    offset: int = Field(ge=0)  # character offset of the "Period" match
    lunch: str | None = None  # nearest lunch marker before offset, e.g. "B Lunch"


class LayoutEvidence(BaseModel):
    """Where a layout-mode period label sits on the page (y grows upward)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["layout"] = "layout"
    x: float
    y: float


Evidence = Annotated[
    Union[StreamEvidence, LayoutEvidence], Field(discriminator="kind")
]


class RawOccurrence(BaseModel):
    """One printed appearance of a period's time range, as read off the page.

    Several raw occurrences may share a (period, column) key when A/B lunch
    splits a period. Layout-mode labels with no time range underneath keep
    start and end as None.
    """

    model_config = ConfigDict(frozen=True)

    period: int = Field(ge=1)
    start: TimeOfDay | None = None
    end: TimeOfDay | None = None
    column: int = Field(ge=0)
    evidence: Evidence

    @property
    def has_time(self) -> bool:
        return self.start is not None and self.end is not None


class ResolvedOccurrence(BaseModel):
    """The canonical timing of one period on one weekday column."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(ge=1)
    start: TimeOfDay
    end: TimeOfDay
    column: int = Field(ge=0)
    evidence: Evidence

    @classmethod
    def from_raw(cls, raw: RawOccurrence) -> "ResolvedOccurrence":
        return cls(
            period=raw.period,
            start=raw.start,
            end=raw.end,
            column=raw.column,
            evidence=raw.evidence,
        )


class ScheduleEntry(BaseModel):
    """A finished class period with absolute start and end.

    Dumps as {"name", "startTime", "endTime"} with by_alias=True, the shape
    the schedule store and JSON output use.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str  # "Period 3"
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")


class TextFragment(BaseModel):
    """A piece of text at a page position, in PDF coordinates (y grows upward)."""

    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float
    # Horizontal extent from x; 0 when unknown
    width: float = Field(default=0.0, ge=0)


class TextStream(BaseModel):
    """Stream-mode extraction input: the whole document text in reading order."""

    kind: Literal["stream"] = "stream"
    text: str


class FragmentLayout(BaseModel):
    """Layout-mode extraction input: positioned text fragments of the page."""

    kind: Literal["layout"] = "layout"
    fragments: list[TextFragment] = Field(default_factory=list)


ExtractionInput = Annotated[
    Union[TextStream, FragmentLayout], Field(discriminator="kind")
]


class PDFLink(BaseModel):
    """A schedule PDF anchor found on the school's daily-schedule page."""

    file_name: str  # data-file-name attribute, e.g. "April 6th - 10th.pdf"
    resource_uuid: str  # data-resource-uuid attribute
    url: str  # absolute download URL
    text: str  # anchor text, used as the local file name


class DocumentResult(BaseModel):
    """Outcome of processing one downloaded schedule document."""

    name: str
    entries: list[ScheduleEntry] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
