"""Show how a schedule PDF comes out of text extraction.

Debugging aid for the stream-mode regexes: prints the numbered lines that
mention "Period" (or --all lines), and with --fragments the positioned
fragments layout-mode sees.

Usage:
    python scripts/inspect_pdf.py "downloads/April 6th - 10th.pdf"
    python scripts/inspect_pdf.py "downloads/April 6th - 10th.pdf" --all
    python scripts/inspect_pdf.py "downloads/April 6th - 10th.pdf" --fragments
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from schedule_ingest.errors import IngestError  # noqa: E402
from schedule_ingest.pdf import read_fragments, read_text  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Inspect schedule PDF extraction")
    parser.add_argument("path", help="PDF file to inspect")
    parser.add_argument("--all", action="store_true", help="Print every line")
    parser.add_argument(
        "--fragments", action="store_true", help="Print positioned fragments"
    )
    args = parser.parse_args()

    try:
        if args.fragments:
            layout = read_fragments(args.path)
            for f in sorted(layout.fragments, key=lambda f: (-f.y, f.x)):
                print(f"({f.x:7.1f}, {f.y:7.1f})  {f.text!r}")
            return

        lines = read_text(args.path).text.split("\n")
    except IngestError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    for i, line in enumerate(lines):
        if args.all or "Period" in line:
            print(f'Line {i}: "{line}"')


if __name__ == "__main__":
    main()
