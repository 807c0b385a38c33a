from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase, override_settings

from carguess.puzzles.dates import format_date_key, get_date_key, parse_date_key, shift_date_key


class DateKeyTests(SimpleTestCase):
    def test_formats_in_paris_time(self):
        self.assertEqual(format_date_key(datetime(2024, 1, 15, 10, 30, tzinfo=dt_timezone.utc)), "2024-01-15")

    def test_rolls_over_at_paris_midnight(self):
        self.assertEqual(format_date_key(datetime(2024, 1, 15, 23, 30, tzinfo=dt_timezone.utc)), "2024-01-16")

    def test_summer_offset(self):
        # CEST is UTC+2
        self.assertEqual(format_date_key(datetime(2024, 7, 1, 21, 59, tzinfo=dt_timezone.utc)), "2024-07-01")
        self.assertEqual(format_date_key(datetime(2024, 7, 1, 22, 0, tzinfo=dt_timezone.utc)), "2024-07-02")

    def test_naive_is_utc(self):
        self.assertEqual(format_date_key(datetime(2024, 2, 20, 22, 30)), "2024-02-20")
        self.assertEqual(format_date_key(datetime(2024, 2, 20, 23, 30)), "2024-02-21")

    def test_explicit_zone(self):
        value = datetime(2024, 1, 15, 23, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(format_date_key(value, "UTC"), "2024-01-15")
        self.assertEqual(format_date_key(value, ZoneInfo("America/New_York")), "2024-01-15")

    @override_settings(CARGUESS_TIME_ZONE="UTC")
    def test_zone_from_settings(self):
        self.assertEqual(get_date_key(datetime(2024, 1, 15, 23, 30, tzinfo=dt_timezone.utc)), "2024-01-15")

    def test_get_date_key_matches_formatter(self):
        now = datetime(2024, 2, 20, 22, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(get_date_key(now), format_date_key(now))

    def test_shift(self):
        self.assertEqual(shift_date_key("2024-03-01", -1), "2024-02-29")
        self.assertEqual(shift_date_key("2024-12-31", 1), "2025-01-01")

    def test_parse_rejects_malformed(self):
        with self.assertRaises(ValueError):
            parse_date_key("15/01/2024")
