import tempfile
import unittest
from pathlib import Path
from unittest import mock

from schedule_ingest.errors import ExtractionError
from schedule_ingest.pdf import (
    list_pdf_files,
    open_document,
    read_fragments,
    read_text,
    words_to_fragments,
)
from schedule_ingest.models import FragmentLayout, TextStream


def _fake_pdf(pages: list) -> mock.MagicMock:
    pdf = mock.MagicMock()
    pdf.pages = pages
    opened = mock.MagicMock()
    opened.__enter__.return_value = pdf
    return opened


def _page(text: str = "", words: list | None = None, height: float = 792.0):
    page = mock.MagicMock()
    page.extract_text.return_value = text
    page.extract_words.return_value = words or []
    page.height = height
    return page


class TestListPdfFiles(unittest.TestCase):
    def test_only_pdfs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("April 6th - 10th.pdf", "May 4th - 8th.PDF", "notes.txt"):
                (Path(tmp) / name).write_bytes(b"")
            names = {p.name for p in list_pdf_files(tmp)}
        self.assertEqual(names, {"April 6th - 10th.pdf", "May 4th - 8th.PDF"})

    def test_missing_directory(self) -> None:
        self.assertEqual(list_pdf_files("/nonexistent/schedule/downloads"), [])


class TestReadText(unittest.TestCase):
    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_pages_joined(self, pdf_open) -> None:
        pdf_open.return_value = _fake_pdf([_page("Monday\n1-6"), _page("Period 1")])
        stream = read_text("week.pdf")
        self.assertIsInstance(stream, TextStream)
        self.assertEqual(stream.text, "Monday\n1-6\nPeriod 1")

    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_no_text_layer(self, pdf_open) -> None:
        pdf_open.return_value = _fake_pdf([_page(None)])
        with self.assertRaises(ExtractionError):
            read_text("scan.pdf")

    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_unreadable_file(self, pdf_open) -> None:
        pdf_open.side_effect = OSError("not a PDF")
        with self.assertRaises(ExtractionError):
            read_text("broken.pdf")


class TestReadFragments(unittest.TestCase):
    def test_words_flipped_to_bottom_up(self) -> None:
        fragments = words_to_fragments(
            [
                {"text": "Monday", "x0": 40.0, "x1": 76.0, "top": 60.0, "bottom": 72.0},
                {"text": "   ", "x0": 90.0, "x1": 90.0, "top": 60.0, "bottom": 72.0},
                {"text": "Period 1", "x0": 40.5, "x1": 80.5, "top": 100.0, "bottom": 112.0},
            ],
            page_height=792.0,
        )
        self.assertEqual([f.text for f in fragments], ["Monday", "Period 1"])
        self.assertEqual(fragments[0].y, 720.0)
        self.assertEqual(fragments[0].width, 36.0)
        self.assertGreater(fragments[0].y, fragments[1].y)

    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_first_page_only(self, pdf_open) -> None:
        first = _page(words=[{"text": "Monday", "x0": 40.0, "x1": 40.0, "bottom": 72.0}])
        second = _page(words=[{"text": "Tuesday", "x0": 40.0, "x1": 40.0, "bottom": 72.0}])
        pdf_open.return_value = _fake_pdf([first, second])

        layout = read_fragments("week.pdf")
        self.assertIsInstance(layout, FragmentLayout)
        self.assertEqual([f.text for f in layout.fragments], ["Monday"])
        second.extract_words.assert_not_called()
        first.extract_words.assert_called_once_with(
            keep_blank_chars=True, x_tolerance=3, y_tolerance=3
        )

    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_empty_document(self, pdf_open) -> None:
        pdf_open.return_value = _fake_pdf([])
        with self.assertRaises(ExtractionError):
            read_fragments("empty.pdf")


class TestOpenDocument(unittest.TestCase):
    @mock.patch("schedule_ingest.pdf.pdfplumber.open")
    def test_mode_selects_reader(self, pdf_open) -> None:
        pdf_open.return_value = _fake_pdf(
            [_page("Monday", words=[{"text": "Monday", "x0": 1.0, "x1": 1.0, "bottom": 2.0}])]
        )
        self.assertEqual(open_document("a.pdf").kind, "stream")
        self.assertEqual(open_document("a.pdf", mode="layout").kind, "layout")


if __name__ == "__main__":
    unittest.main()
