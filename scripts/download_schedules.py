"""Download the weekly schedule PDFs from the school's daily-schedule page.

Run with: python scripts/download_schedules.py
List:     python scripts/download_schedules.py --list
Dir:      python scripts/download_schedules.py --download-dir data/pdfs

Settings (page URL, download directory, logging) come from SCHEDULE_*
environment variables or .env; see src/schedule_ingest/config.py.

Exit codes:
  0 = success (file paths, or links with --list, on stdout)
  1 = error (message on stderr)
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
from schedule_ingest.errors import IngestError  # noqa: E402
from schedule_ingest.logging import setup_logging  # noqa: E402
from schedule_ingest.scraper import ScheduleScraper  # noqa: E402


def _log(msg: str) -> None:
    """Write progress messages to stderr so stdout stays clean."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download weekly schedule PDFs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Only print the discovered PDF links as JSON, download nothing.",
    )
    parser.add_argument(
        "--download-dir",
        type=str,
        default=None,
        help="Directory to save PDFs to (default: SCHEDULE_DOWNLOAD_DIR).",
    )
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    scraper = ScheduleScraper(
        page_url=config.schedule_page_url,
        base_url=config.base_url,
        download_dir=args.download_dir or config.download_dir,
        timeout=config.request_timeout,
    )

    if args.list:
        links = scraper.extract_pdf_links()
        print(json.dumps([link.model_dump() for link in links], indent=2))
        return

    _log(f"download_schedules: fetching {config.schedule_page_url}")
    paths = scraper.download_all()
    for path in paths:
        print(path)
    _log(f"download_schedules: {len(paths)} PDFs saved to {scraper.download_dir}")


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except IngestError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
