"""Raw period-occurrence extraction from one of the two PDF extraction inputs.

Both strategies return unresolved RawOccurrences; duplicates are collapsed
afterwards by schedule_ingest.duplicates.resolve_duplicates.
"""

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.extractors.layout import extract_layout_occurrences
from schedule_ingest.extractors.stream import extract_stream_occurrences
from schedule_ingest.models import (
    ExtractionInput,
    FragmentLayout,
    RawOccurrence,
    TextStream,
)


def extract_occurrences(
    source: ExtractionInput,
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[RawOccurrence]:
    """Run the extraction strategy matching the input's kind."""
    if isinstance(source, TextStream):
        return extract_stream_occurrences(source.text, conventions)
    if isinstance(source, FragmentLayout):
        return extract_layout_occurrences(source.fragments, conventions)
    raise TypeError(f"Unsupported extraction input: {type(source).__name__}")


__all__ = [
    "extract_occurrences",
    "extract_layout_occurrences",
    "extract_stream_occurrences",
]
