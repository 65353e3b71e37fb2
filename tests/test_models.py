import unittest
from datetime import datetime

from pydantic import TypeAdapter, ValidationError

from schedule_ingest.models import (
    ExtractionInput,
    FragmentLayout,
    RawOccurrence,
    ScheduleEntry,
    TextStream,
    TimeOfDay,
)


class TestTimeOfDay(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(TimeOfDay.parse("1:45"), TimeOfDay(hour=1, minute=45))
        self.assertEqual(TimeOfDay.parse(" 10:05 "), TimeOfDay(hour=10, minute=5))

    def test_str(self) -> None:
        self.assertEqual(str(TimeOfDay(hour=9, minute=5)), "9:05")

    def test_rejects_non_times(self) -> None:
        for text in ("145", "1:5", "noon", "1:75"):
            with self.assertRaises(ValueError):
                TimeOfDay.parse(text)


class TestExtractionInput(unittest.TestCase):
    def test_discriminated_by_kind(self) -> None:
        adapter = TypeAdapter(ExtractionInput)
        stream = adapter.validate_python({"kind": "stream", "text": "Monday"})
        layout = adapter.validate_python(
            {"kind": "layout", "fragments": [{"text": "Monday", "x": 1, "y": 2}]}
        )
        self.assertIsInstance(stream, TextStream)
        self.assertIsInstance(layout, FragmentLayout)
        self.assertEqual(layout.fragments[0].y, 2.0)

    def test_unknown_kind_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            TypeAdapter(ExtractionInput).validate_python({"kind": "ocr", "text": ""})


class TestRawOccurrence(unittest.TestCase):
    def test_evidence_from_dict(self) -> None:
        occurrence = RawOccurrence.model_validate(
            {
                "period": 3,
                "start": {"hour": 10, "minute": 5},
                "end": {"hour": 10, "minute": 55},
                "column": 0,
                "evidence": {"kind": "stream", "offset": 12, "lunch": "A Lunch"},
            }
        )
        self.assertEqual(occurrence.evidence.lunch, "A Lunch")
        self.assertTrue(occurrence.has_time)


class TestScheduleEntry(unittest.TestCase):
    def test_dump_by_alias(self) -> None:
        entry = ScheduleEntry(
            name="Period 1",
            start_time=datetime(2026, 4, 6, 7, 30),
            end_time=datetime(2026, 4, 6, 8, 25),
        )
        self.assertEqual(
            entry.model_dump(mode="json", by_alias=True),
            {
                "name": "Period 1",
                "startTime": "2026-04-06T07:30:00",
                "endTime": "2026-04-06T08:25:00",
            },
        )

    def test_frozen(self) -> None:
        entry = ScheduleEntry(
            name="Period 1",
            startTime=datetime(2026, 4, 6, 7, 30),
            endTime=datetime(2026, 4, 6, 8, 25),
        )
        with self.assertRaises(ValidationError):
            entry.name = "Period 2"


if __name__ == "__main__":
    unittest.main()
