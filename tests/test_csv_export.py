import csv
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from gradekeeper.core.roster import Roster
from gradekeeper.core.subjects import SubjectRegistry
from gradekeeper.services.csv_export import (
    ExportServiceError,
    build_header,
    build_rows,
    default_export_filename,
    export_roster,
)


class CsvExportTests(unittest.TestCase):
    def setUp(self):
        self.registry = SubjectRegistry.from_pairs([("数学", 20), ("英語", 18)])
        self.roster = Roster()
        yamada = self.roster.add_student("S001", "山田 太郎")
        record = yamada.get_or_create_record("数学", self.registry)
        record.attended_days = 18
        record.test_score = 85.0
        suzuki = self.roster.add_student("S002", "鈴木 花子")
        suzuki.get_or_create_record("数学", self.registry).attended_days = 16

    def test_header(self):
        self.assertEqual(
            build_header(self.registry),
            [
                "学籍番号", "氏名",
                "数学_総授業数", "数学_出席日数", "数学_出席率(%)", "数学_出席点", "数学_テスト点", "数学_総合点", "数学_評価",
                "英語_総授業数", "英語_出席日数", "英語_出席率(%)", "英語_出席点", "英語_テスト点", "英語_総合点", "英語_評価",
                "総合平均", "全体評価",
            ],
        )

    def test_rows(self):
        rows = build_rows(self.roster, self.registry)
        self.assertEqual(
            rows[0],
            ["S001", "山田 太郎", "20", "18", "90.0", "90.0", "85", "87.5", "優",
             "18", "-", "-", "-", "-", "-", "-", "87.5", "優"],
        )
        self.assertEqual(
            rows[1],
            ["S002", "鈴木 花子", "20", "16", "80.0", "80.0", "", "", "-",
             "18", "-", "-", "-", "-", "-", "-", "0.0", "不可"],
        )

    def test_rows_skip_unconfigured_subjects(self):
        self.registry.remove("数学")
        rows = build_rows(self.roster, self.registry)
        self.assertEqual(len(rows[0]), 2 + 7 + 2)
        self.assertEqual(rows[0][-2:], ["87.5", "優"])

    def test_export_writes_bom_and_rows(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out" / "grades.csv"
            saved = export_roster(target, self.roster, self.registry)
            self.assertEqual(saved, target.resolve())
            raw = target.read_bytes()
            self.assertTrue(raw.startswith(b"\xef\xbb\xbf"))
            with target.open(encoding="utf-8-sig", newline="") as fh:
                rows = list(csv.reader(fh))
        self.assertEqual(rows[0], build_header(self.registry))
        self.assertEqual(rows[1:], build_rows(self.roster, self.registry))

    def test_export_empty_roster(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ExportServiceError):
                export_roster(Path(tmp) / "grades.csv", Roster(), self.registry)

    def test_export_io_failure(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ExportServiceError) as ctx:
                export_roster(Path(tmp), self.roster, self.registry)
        self.assertIn("エクスポートに失敗しました", str(ctx.exception))

    def test_default_filename(self):
        self.assertEqual(default_export_filename(datetime(2026, 3, 4, 5, 6, 7)), "grades_20260304_050607.csv")


if __name__ == "__main__":
    unittest.main()
