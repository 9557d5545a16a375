import unittest

from gradekeeper.core.entry import EntryPreview, preview_entry
from gradekeeper.core.records import SubjectRecord


class PreviewEntryTests(unittest.TestCase):
    def test_complete_entry(self):
        preview = preview_entry(20, "18", "85")
        self.assertEqual(preview, EntryPreview(rate="90%", attendance_points="90.0", composite="87.5", grade="優", sufficient=True))

    def test_bad_attendance_blanks_everything(self):
        self.assertEqual(preview_entry(20, "abc", "85"), EntryPreview())
        self.assertEqual(preview_entry(20, "", "85").grade, "--")

    def test_bad_test_score(self):
        preview = preview_entry(20, "18", "eighty")
        self.assertEqual((preview.rate, preview.attendance_points), ("90%", "90.0"))
        self.assertEqual((preview.composite, preview.grade), ("--", "--"))
        self.assertTrue(preview.sufficient)

    def test_blank_test_follows_grade_rule(self):
        self.assertEqual(preview_entry(20, "20", "").grade, "-")
        short = preview_entry(16, "9", "")
        self.assertEqual((short.composite, short.grade, short.sufficient), ("--", "不可(出席)", False))

    def test_values_are_clamped(self):
        preview = preview_entry(20, "25", "120")
        self.assertEqual((preview.rate, preview.composite, preview.grade), ("100%", "100.0", "秀"))

    def test_zero_total_days(self):
        preview = preview_entry(0, "0", "50")
        self.assertEqual((preview.rate, preview.grade), ("0%", "不可(出席)"))

    def test_matches_committed_record(self):
        record = SubjectRecord(16)
        record.apply_entry("9", "50")
        preview = preview_entry(16, "9", "50")
        self.assertEqual(preview.grade, record.grade_label())
        self.assertEqual(preview.composite, "53.1")


if __name__ == "__main__":
    unittest.main()
