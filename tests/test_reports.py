import unittest

from gradekeeper.core.reports import EMPTY_ROSTER_TEXT, build_stats_text
from gradekeeper.core.roster import Roster
from gradekeeper.services.sample_data import default_registry, seed_roster


class StatsTextTests(unittest.TestCase):
    def setUp(self):
        self.roster = Roster()

    def test_empty_roster(self):
        self.assertEqual(build_stats_text(self.roster), EMPTY_ROSTER_TEXT)

    def test_class_summary(self):
        seed_roster(self.roster, default_registry())
        text = build_stats_text(self.roster)
        self.assertIn("生徒数: 5名", text)
        self.assertIn("秀: 1名", text)
        self.assertIn("優: 2名", text)
        self.assertIn("不可: 2名", text)
        self.assertNotIn("良:", text)
        self.assertNotIn("👤", text)

    def test_selected_student(self):
        seed_roster(self.roster, default_registry())
        text = build_stats_text(self.roster, self.roster.get("S001"))
        self.assertIn("👤 山田 太郎", text)
        self.assertIn("出席: 18/20回（90%）", text)
        self.assertIn("出席点: 90.0  テスト: 85", text)
        self.assertIn("総合: 87.5  評価: 優", text)

    def test_selected_student_without_records(self):
        student = self.roster.add_student("S001", "山田 太郎")
        text = build_stats_text(self.roster, student)
        self.assertIn("生徒数: 1名", text)
        self.assertNotIn("👤", text)

    def test_ungraded_subject(self):
        registry = default_registry()
        student = self.roster.add_student("S001", "山田 太郎")
        student.get_or_create_record("数学", registry).attended_days = 20
        text = build_stats_text(self.roster, student)
        self.assertIn("テスト: -", text)
        self.assertIn("総合: -  評価: -", text)


if __name__ == "__main__":
    unittest.main()
