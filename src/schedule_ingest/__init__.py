"""Weekly class-schedule PDF ingestion.

Recovers timed class periods from the school's weekly schedule PDFs (a
Monday-Friday grid with A/B lunch splits) and turns them into dated
schedule entries.
"""

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.models import (
    FragmentLayout,
    ScheduleEntry,
    TextFragment,
    TextStream,
)
from schedule_ingest.pipeline import parse_document, process_documents

__all__ = [
    "parse_document",
    "process_documents",
    "ScheduleConventions",
    "DEFAULT_CONVENTIONS",
    "ScheduleEntry",
    "TextStream",
    "FragmentLayout",
    "TextFragment",
]
