import unittest
from datetime import datetime

from schedule_ingest.database import ScheduleDatabase
from schedule_ingest.models import ScheduleEntry


def _entry(name: str, hour: int) -> ScheduleEntry:
    return ScheduleEntry(
        name=name,
        start_time=datetime(2026, 4, 6, hour, 0),
        end_time=datetime(2026, 4, 6, hour, 50),
    )


class TestScheduleDatabase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = ScheduleDatabase("sqlite://")
        self.addCleanup(self.db.close)

    def test_insert_many_and_get_all(self) -> None:
        entries = [_entry("Period 1", 7), _entry("Period 2", 8)]
        self.assertEqual(self.db.insert_many(entries), 2)
        stored = self.db.get_all()
        self.assertEqual([e for _, e in stored], entries)

    def test_insert_and_get_by_id(self) -> None:
        row_id = self.db.insert(_entry("Period 5", 13))
        self.assertEqual(self.db.get_by_id(row_id), _entry("Period 5", 13))
        self.assertIsNone(self.db.get_by_id(row_id + 100))

    def test_clear_all(self) -> None:
        self.db.insert_many([_entry("Period 1", 7)])
        self.db.clear_all()
        self.assertEqual(self.db.get_all(), [])


if __name__ == "__main__":
    unittest.main()
