"""Shared helpers for naming downloaded schedule files."""

import re

from schedule_ingest.models import PDFLink

# Characters that are invalid in Windows or POSIX file names
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def sanitize_filename(name: str) -> str:
    """Replace invalid file-name characters with "-" and collapse whitespace."""
    name = _INVALID_FILENAME_CHARS.sub("-", name)
    return re.sub(r"\s+", " ", name).strip()


def pdf_filename(link: PDFLink) -> str:
    """Local file name for a schedule PDF: its link text, else its file name.

    The link text ("April 6th - 10th") carries the week the document covers,
    which is what the date-range parser reads back later.
    """
    display_name = sanitize_filename(link.text) or link.file_name
    if not display_name.lower().endswith(".pdf"):
        display_name = f"{display_name}.pdf"
    return display_name
