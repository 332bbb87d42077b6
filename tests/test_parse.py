import datetime
import unittest

import pendulum
import typer

from memote.repository.note import NoteRepository
from memote.repository.storage import MemoryKeyValueStorage
from memote.terminal.parse import parse_date, parse_datetime, resolve_note_id
from memote.terminal.validate import validate_log_level, validate_tags, validate_title


class TestParseDatetime(unittest.TestCase):
    def test_none(self):
        self.assertIsNone(parse_datetime(None))

    def test_date_and_time_are_local(self):
        parsed = parse_datetime("2024-01-15 14:30")
        assert parsed is not None

        local = parsed.in_tz("local")
        self.assertEqual((local.year, local.month, local.day), (2024, 1, 15))
        self.assertEqual((local.hour, local.minute), (14, 30))

    def test_result_is_utc(self):
        parsed = parse_datetime("now")
        assert parsed is not None

        self.assertEqual(parsed.timezone_name, "UTC")

    def test_rejects_out_of_range_time(self):
        with self.assertRaises(typer.BadParameter):
            parse_datetime("25:00")

    def test_rejects_garbage(self):
        with self.assertRaises(typer.BadParameter):
            parse_datetime("next full moon")


class TestParseDate(unittest.TestCase):
    def test_default_is_today(self):
        self.assertEqual(parse_date(None), pendulum.today("local").date())

    def test_iso_date(self):
        self.assertEqual(parse_date("2024-01-15"), datetime.date(2024, 1, 15))

    def test_day_offset(self):
        self.assertEqual(
            parse_date("-1"), pendulum.today("local").subtract(days=1).date()
        )

    def test_named_days(self):
        self.assertEqual(parse_date("tomorrow"), pendulum.tomorrow("local").date())
        self.assertEqual(parse_date("y"), pendulum.yesterday("local").date())


class TestResolveNoteId(unittest.TestCase):
    def setUp(self):
        ids = iter(
            [
                "3f2a0c4e-0000-4000-8000-000000000001",
                "3f2b9d11-0000-4000-8000-000000000002",
            ]
        )
        self.repository = NoteRepository(
            MemoryKeyValueStorage(), id_generator=lambda: next(ids)
        )
        self.repository.create("a", "", None, [])
        self.repository.create("b", "", None, [])

    def test_full_id(self):
        self.assertEqual(
            resolve_note_id(self.repository, "3f2a0c4e-0000-4000-8000-000000000001"),
            "3f2a0c4e-0000-4000-8000-000000000001",
        )

    def test_unique_prefix(self):
        self.assertEqual(
            resolve_note_id(self.repository, "3F2B"),
            "3f2b9d11-0000-4000-8000-000000000002",
        )

    def test_ambiguous_prefix(self):
        with self.assertRaises(typer.BadParameter):
            resolve_note_id(self.repository, "3f2")

    def test_unknown_id_exits(self):
        with self.assertRaises(typer.Exit):
            resolve_note_id(self.repository, "ffff")


class TestValidate(unittest.TestCase):
    def test_blank_title_is_rejected(self):
        for title in ["", "   ", "\t\n"]:
            with self.assertRaises(typer.BadParameter):
                validate_title(title)

    def test_title_is_kept_verbatim(self):
        self.assertEqual(validate_title("  Groceries "), "  Groceries ")

    def test_unknown_tag_is_rejected(self):
        with self.assertRaises(typer.BadParameter):
            validate_tags(["Important", "Someday"])

    def test_known_tags_pass(self):
        self.assertEqual(validate_tags(["Complete Now"]), ["Complete Now"])

    def test_log_level_is_normalized(self):
        self.assertEqual(validate_log_level("debug"), "DEBUG")
        with self.assertRaises(typer.BadParameter):
            validate_log_level("chatty")


if __name__ == "__main__":
    unittest.main()
