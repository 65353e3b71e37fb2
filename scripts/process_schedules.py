"""Parse downloaded weekly schedule PDFs into dated class periods.

Run with: python scripts/process_schedules.py
Table:    python scripts/process_schedules.py --table
One file: python scripts/process_schedules.py --file "downloads/April 6th - 10th.pdf"
Layout:   python scripts/process_schedules.py --mode layout
Store:    python scripts/process_schedules.py --store --clear

Without --store the entries are printed as JSON
({"name", "startTime", "endTime"} per entry) or as a table.

Exit codes:
  0 = every document parsed (possibly to zero entries)
  1 = error, or at least one document could not be read
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add src/ to path so the script runs from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from schedule_ingest.config import get_config  # noqa: E402
from schedule_ingest.database import ScheduleDatabase  # noqa: E402
from schedule_ingest.errors import IngestError  # noqa: E402
from schedule_ingest.logging import setup_logging  # noqa: E402
from schedule_ingest.models import DocumentResult, ScheduleEntry  # noqa: E402
from schedule_ingest.pdf import list_pdf_files  # noqa: E402
from schedule_ingest.pipeline import process_documents  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse weekly schedule PDFs into class periods.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        choices=["stream", "layout"],
        default=None,
        help="Extraction mode (default: SCHEDULE_EXTRACTION_MODE or stream).",
    )
    parser.add_argument(
        "--file",
        action="append",
        default=None,
        help="Parse only this PDF (repeatable). Default: every PDF in the download dir.",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table instead of JSON.",
    )
    output_group.add_argument(
        "--store",
        action="store_true",
        help="Insert the entries into the schedule database instead of printing.",
    )

    parser.add_argument(
        "--clear",
        action="store_true",
        help="With --store, delete existing entries first.",
    )
    return parser.parse_args()


def _format_table(results: list[DocumentResult]) -> str:
    """Format entries as a table: Document | Day | Period | Start | End."""
    headers = ["Document", "Day", "Period", "Start", "End"]
    rows = []
    for result in results:
        if not result.ok:
            rows.append([result.name, "-", f"ERROR: {result.error}", "-", "-"])
            continue
        for e in result.entries:
            rows.append(
                [
                    result.name,
                    e.start_time.strftime("%a %Y-%m-%d"),
                    e.name,
                    e.start_time.strftime("%H:%M"),
                    e.end_time.strftime("%H:%M"),
                ]
            )

    if not rows:
        return "(no schedule entries)"

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)) for row in rows
    ]
    return "\n".join([header_line, separator, *row_lines])


def main(args: argparse.Namespace) -> int:
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    mode = args.mode or config.extraction_mode
    files = args.file or list_pdf_files(config.download_dir)
    if not files:
        _log("process_schedules: no PDF files to process")
        return 0

    _log(f"process_schedules: {len(files)} documents (mode={mode})")
    results = process_documents(files, mode=mode, conventions=config.conventions())

    for result in results:
        status = f"{len(result.entries)} entries" if result.ok else f"FAILED ({result.error})"
        _log(f"  {result.name}: {status}")

    entries: list[ScheduleEntry] = [e for r in results for e in r.entries]

    if args.store:
        db = ScheduleDatabase(config.database_url)
        try:
            if args.clear:
                db.clear_all()
            db.insert_many(entries)
        finally:
            db.close()
        _log(f"process_schedules: stored {len(entries)} entries")
    elif args.table:
        print(_format_table(results))
    else:
        output = {
            r.name: [e.model_dump(mode="json", by_alias=True) for e in r.entries]
            for r in results
            if r.ok
        }
        print(json.dumps(output, indent=2))

    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    args = _parse_args()
    try:
        sys.exit(main(args))
    except IngestError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
