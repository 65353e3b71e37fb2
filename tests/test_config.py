import os
import unittest
from unittest import mock

from schedule_ingest.config import IngestConfig


class TestIngestConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = IngestConfig(_env_file=None)
        self.assertEqual(config.extraction_mode, "stream")
        self.assertEqual(config.conventions().academic_year_start, 2025)
        self.assertEqual(config.conventions().pm_cutoff_hour, 7)

    def test_environment_overrides(self) -> None:
        env = {
            "SCHEDULE_ACADEMIC_YEAR_START": "2026",
            "SCHEDULE_PM_CUTOFF_HOUR": "6",
            "SCHEDULE_EXTRACTION_MODE": "layout",
            "SCHEDULE_LAYOUT_ROW_HEIGHT": "14.5",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = IngestConfig(_env_file=None)
        conventions = config.conventions()
        self.assertEqual(config.extraction_mode, "layout")
        self.assertEqual(conventions.academic_year_start, 2026)
        self.assertEqual(conventions.pm_cutoff_hour, 6)
        self.assertEqual(conventions.layout_row_height, 14.5)
        self.assertEqual(conventions.year_for_month(1), 2027)


if __name__ == "__main__":
    unittest.main()
