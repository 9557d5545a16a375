import os
import unittest
from unittest import mock

from gradekeeper.config.settings import Settings, _env_flag
from gradekeeper.state.app_state import create_app_state


class SettingsTests(unittest.TestCase):
    def test_env_flag(self):
        with mock.patch.dict(os.environ, {"GRADEKEEPER_WEB": " Yes "}):
            self.assertTrue(_env_flag("GRADEKEEPER_WEB", "0"))
        with mock.patch.dict(os.environ, {"GRADEKEEPER_WEB": "0"}):
            self.assertFalse(_env_flag("GRADEKEEPER_WEB", "1"))
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(_env_flag("GRADEKEEPER_SAMPLE_DATA", "1"))

    def test_overrides(self):
        custom = Settings(web_mode=True, port=9000, seed_sample_data=False)
        self.assertEqual((custom.web_mode, custom.port, custom.seed_sample_data), (True, 9000, False))


class AppStateTests(unittest.TestCase):
    def test_seeded_state(self):
        state = create_app_state()
        self.assertEqual(len(state.roster), 5)
        self.assertEqual(state.registry.names(), ["数学", "英語", "国語", "理科", "社会"])
        self.assertIsNone(state.selected)

    def test_select_and_remove(self):
        state = create_app_state(seed=False)
        self.assertTrue(state.roster.is_empty())
        state.roster.add_student("S001", "山田 太郎")
        state.select("S001")
        self.assertEqual(state.selected.name, "山田 太郎")
        state.remove_selected()
        self.assertIsNone(state.selected_id)
        self.assertTrue(state.roster.is_empty())
        state.remove_selected()

    def test_readded_subject_recounts_kept_records(self):
        state = create_app_state()
        state.registry.remove("数学")
        state.add_subject("数学", 30)
        record = state.roster.get("S001").get_record("数学")
        self.assertEqual((record.total_days, record.attended_days), (30, 18))
        self.assertAlmostEqual(record.attendance_rate(), 0.6)
        self.assertEqual(record.grade_label(), "不可(出席)")

    def test_changed_subject_days_reach_records(self):
        state = create_app_state()
        state.set_subject_days("理科", 10)
        self.assertEqual(state.registry.total_days("理科"), 10)
        for student in state.roster:
            self.assertEqual(student.get_record("理科").total_days, 10)
            self.assertLessEqual(student.get_record("理科").attended_days, 10)


if __name__ == "__main__":
    unittest.main()
