import unittest

from gradekeeper.core.formatting import (
    format_optional_score,
    format_optional_whole,
    format_percent,
    format_score,
    format_whole,
)


class FormattingTests(unittest.TestCase):
    def test_one_decimal(self):
        self.assertEqual(format_score(87.5), "87.5")
        self.assertEqual(format_score(90), "90.0")
        self.assertEqual(format_score(86.66666), "86.7")
        self.assertEqual(format_score(0.25), "0.3")

    def test_ties_round_up(self):
        self.assertEqual(format_whole(84.5), "85")
        self.assertEqual(format_whole(85.5), "86")
        self.assertEqual(format_whole(99.4), "99")

    def test_percent(self):
        self.assertEqual(format_percent(0.9), "90%")
        self.assertEqual(format_percent(0.5625), "56%")
        self.assertEqual(format_percent(0.0), "0%")

    def test_optional(self):
        self.assertEqual(format_optional_score(None), "-")
        self.assertEqual(format_optional_whole(None, placeholder="--"), "--")
        self.assertEqual(format_optional_whole(72.0), "72")


if __name__ == "__main__":
    unittest.main()
