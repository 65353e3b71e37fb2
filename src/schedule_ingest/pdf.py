"""Read downloaded schedule PDFs into one of the two extraction inputs.

pdfplumber gives both views of a page: the text in reading order for
stream-mode, and positioned words for layout-mode. pdfplumber measures
``top``/``bottom`` from the top of the page; fragments are flipped to the
PDF's native bottom-up y so that "the row below" means a smaller y.
"""

from pathlib import Path
from typing import Literal

import pdfplumber

from schedule_ingest.errors import ExtractionError
from schedule_ingest.logging import get_logger
from schedule_ingest.models import (
    ExtractionInput,
    FragmentLayout,
    TextFragment,
    TextStream,
)

log = get_logger(__name__)

# Words closer than this (in points) are merged into one fragment, so
# "Period 3" and "11:05 - 11:55 (50)" each come out whole
WORD_X_TOLERANCE = 3
WORD_Y_TOLERANCE = 3


def list_pdf_files(directory: str | Path) -> list[Path]:
    """PDF files in a directory, sorted by name. Empty if it doesn't exist."""
    directory = Path(directory)
    if not directory.is_dir():
        log.warning("download_dir_missing", path=str(directory))
        return []

    files = sorted(
        p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".pdf"
    )
    log.info("pdf_files_found", path=str(directory), count=len(files))
    return files


def read_text(path: str | Path) -> TextStream:
    """Extract the whole document text, pages joined by newlines.

    Raises:
        ExtractionError: If the file can't be opened or has no text layer.
    """
    try:
        with pdfplumber.open(path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise ExtractionError(f"Could not read {path}: {e}") from e

    text = "\n".join(pages)
    if not text.strip():
        raise ExtractionError(f"No text layer in {path}")

    log.debug("pdf_text_read", path=str(path), pages=len(pages), chars=len(text))
    return TextStream(text=text)


def words_to_fragments(words: list[dict], page_height: float) -> list[TextFragment]:
    """Convert pdfplumber words to fragments with bottom-up y (the baseline).

    With ``keep_blank_chars`` a whole header row can come back as one word
    ("Monday   Tuesday"), so the width is kept for splitting it up later.
    """
    fragments: list[TextFragment] = []
    for word in words:
        text = word["text"].strip()
        if not text:
            continue
        fragments.append(
            TextFragment(
                text=text,
                x=float(word["x0"]),
                width=max(float(word["x1"]) - float(word["x0"]), 0.0),
                y=float(page_height) - float(word["bottom"]),
            )
        )
    return fragments


def read_fragments(path: str | Path) -> FragmentLayout:
    """Extract positioned text fragments from the schedule page.

    Only the first page is read; a schedule document covers one week on one
    page.

    Raises:
        ExtractionError: If the file can't be opened or the page has no words.
    """
    try:
        with pdfplumber.open(path) as pdf:
            if not pdf.pages:
                raise ExtractionError(f"No pages in {path}")
            page = pdf.pages[0]
            words = page.extract_words(
                keep_blank_chars=True,
                x_tolerance=WORD_X_TOLERANCE,
                y_tolerance=WORD_Y_TOLERANCE,
            )
            fragments = words_to_fragments(words, page.height)
            page_count = len(pdf.pages)
    except ExtractionError:
        raise
    except Exception as e:
        raise ExtractionError(f"Could not read {path}: {e}") from e

    if not fragments:
        raise ExtractionError(f"No text fragments in {path}")

    if page_count > 1:
        log.debug("pdf_extra_pages_ignored", path=str(path), pages=page_count)
    log.debug("pdf_fragments_read", path=str(path), fragments=len(fragments))
    return FragmentLayout(fragments=fragments)


def open_document(
    path: str | Path, mode: Literal["stream", "layout"] = "stream"
) -> ExtractionInput:
    """Read a PDF in the requested extraction mode."""
    log.info("pdf_opening", path=str(path), mode=mode)
    if mode == "layout":
        return read_fragments(path)
    return read_text(path)
