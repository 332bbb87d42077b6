import unittest

from memote.view.util import format_tags, plain_text_preview


class TestPlainTextPreview(unittest.TestCase):
    def test_short_text_has_no_ellipsis(self):
        self.assertEqual(plain_text_preview("<p>Buy milk</p>", 80), "Buy milk")

    def test_text_of_exact_length_has_no_ellipsis(self):
        self.assertEqual(plain_text_preview("<b>abcde</b>", 5), "abcde")

    def test_long_text_is_cut_with_ellipsis(self):
        self.assertEqual(plain_text_preview("<p>abcdefgh</p>", 5), "abcde…")

    def test_length_counts_text_not_markup(self):
        self.assertEqual(plain_text_preview("<h1 class='big'>abc</h1>", 3), "abc")

    def test_empty_content(self):
        self.assertEqual(plain_text_preview("", 80), "")


class TestFormatTags(unittest.TestCase):
    def test_joins_tags(self):
        self.assertEqual(format_tags(["Important", "Top Priority"]), "Important, Top Priority")

    def test_empty(self):
        self.assertEqual(format_tags(None), "")
        self.assertEqual(format_tags([]), "")


if __name__ == "__main__":
    unittest.main()
