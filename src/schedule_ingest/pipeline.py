"""End-to-end parsing of weekly schedule documents.

parse_document() is the pure core: document name + extraction input in,
sorted schedule entries out. process_documents() is the batch driver over
downloaded PDF files; one bad document never stops the batch.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from schedule_ingest.assemble import assemble_entries
from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.dates import resolve_column_dates
from schedule_ingest.duplicates import resolve_duplicates
from schedule_ingest.errors import IngestError
from schedule_ingest.extractors import extract_occurrences
from schedule_ingest.logging import get_logger
from schedule_ingest.models import DocumentResult, ExtractionInput, ScheduleEntry
from schedule_ingest.pdf import open_document

log = get_logger(__name__)


def parse_document(
    name: str,
    source: ExtractionInput,
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[ScheduleEntry]:
    """Parse one schedule document into entries sorted by start time.

    Args:
        name: Document display name, e.g. "April 6th - 10th".
        source: Extracted text stream or positioned fragments of the PDF.
        conventions: School calendar conventions.

    Returns:
        Schedule entries, or an empty list if the name has no date range.
    """
    dates = resolve_column_dates(name, conventions)
    if not dates:
        return []

    raw = extract_occurrences(source, conventions)
    resolved = resolve_duplicates(raw, conventions)
    entries = assemble_entries(resolved, dates, conventions)
    entries.sort(key=lambda e: (e.start_time, e.name))

    log.info(
        "document_parsed",
        document=name,
        mode=source.kind,
        dates=len(dates),
        raw=len(raw),
        entries=len(entries),
    )
    return entries


def process_documents(
    paths: Iterable[str | Path],
    mode: Literal["stream", "layout"] = "stream",
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[DocumentResult]:
    """Open and parse each PDF, collecting one result per file.

    A file that cannot be read is reported on its result and skipped.
    """
    results: list[DocumentResult] = []
    for path in paths:
        path = Path(path)
        name = path.stem
        try:
            source = open_document(path, mode)
        except IngestError as e:
            log.error("document_failed", document=name, error=str(e))
            results.append(DocumentResult(name=name, error=str(e)))
            continue

        entries = parse_document(name, source, conventions)
        if not entries:
            log.warning("document_empty", document=name)
        results.append(DocumentResult(name=name, entries=entries))

    log.info(
        "documents_processed",
        total=len(results),
        failed=sum(1 for r in results if not r.ok),
        entries=sum(len(r.entries) for r in results),
    )
    return results
