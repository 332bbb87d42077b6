import datetime
import unittest

import pendulum
from helpers import local_ms

from memote.time import (
    datetime_from_ms,
    datetime_to_ms,
    local_date,
    local_day_bounds_ms,
    week_dates,
)


class TestMillis(unittest.TestCase):
    def test_datetime_to_ms_truncates_microseconds(self):
        value = pendulum.datetime(2024, 1, 15, 12, 0, 0, 123_987, tz="UTC")

        self.assertEqual(datetime_to_ms(value), 1_705_320_000_123)

    def test_from_ms_is_utc(self):
        value = datetime_from_ms(1_705_320_000_000)

        self.assertEqual(value, pendulum.datetime(2024, 1, 15, 12, tz="UTC"))

    def test_round_trip(self):
        self.assertEqual(datetime_to_ms(datetime_from_ms(1_705_320_000_456)), 1_705_320_000_456)


class TestLocalDay(unittest.TestCase):
    def test_plain_date_is_unchanged(self):
        self.assertEqual(local_date(datetime.date(2024, 1, 15)), datetime.date(2024, 1, 15))

    def test_aware_datetime_is_converted_to_local(self):
        reference = pendulum.datetime(2024, 1, 15, 12, tz="local")

        self.assertEqual(local_date(reference), datetime.date(2024, 1, 15))

    def test_bounds_cover_whole_local_day(self):
        start, end = local_day_bounds_ms(datetime.date(2024, 1, 15))

        self.assertEqual(start, local_ms(2024, 1, 15))
        self.assertEqual(end, local_ms(2024, 1, 15, 23, 59, 59, 999))
        self.assertEqual(end - start, 86_399_999)


class TestWeekDates(unittest.TestCase):
    def test_week_starts_on_monday(self):
        days = week_dates(datetime.date(2024, 3, 6))

        self.assertEqual(days[0], datetime.date(2024, 3, 4))
        self.assertEqual(days[-1], datetime.date(2024, 3, 10))
        self.assertEqual(len(days), 7)

    def test_monday_reference_starts_its_own_week(self):
        self.assertEqual(week_dates(datetime.date(2024, 3, 4))[0], datetime.date(2024, 3, 4))


if __name__ == "__main__":
    unittest.main()
