from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path

from gradekeeper.core.formatting import PLACEHOLDER, format_score, format_whole
from gradekeeper.core.records import SubjectRecord
from gradekeeper.core.roster import Roster
from gradekeeper.core.subjects import SubjectRegistry

logger = logging.getLogger(__name__)

# BOM lets spreadsheet software detect UTF-8
ENCODING = "utf-8-sig"

SUBJECT_COLUMNS = ("総授業数", "出席日数", "出席率(%)", "出席点", "テスト点", "総合点", "評価")


class ExportServiceError(RuntimeError):
    pass


def default_export_filename(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"grades_{now:%Y%m%d_%H%M%S}.csv"


def build_header(registry: SubjectRegistry) -> list[str]:
    header = ["学籍番号", "氏名"]
    for subject in registry:
        header.extend(f"{subject}_{column}" for column in SUBJECT_COLUMNS)
    header.extend(["総合平均", "全体評価"])
    return header


def _record_cells(record: SubjectRecord) -> list[str]:
    composite = record.composite_score()
    return [
        str(record.total_days),
        str(record.attended_days),
        format_score(record.attendance_rate() * 100),
        format_score(record.attendance_score()),
        "" if record.test_score is None else format_whole(record.test_score),
        "" if composite is None else format_score(composite),
        record.grade_label(),
    ]


def build_rows(roster: Roster, registry: SubjectRegistry) -> list[list[str]]:
    rows = []
    for student in roster:
        row = [student.student_id, student.name]
        for subject, total_days in registry.items():
            record = student.get_record(subject)
            if record is None:
                row.append(str(total_days))
                row.extend([PLACEHOLDER] * (len(SUBJECT_COLUMNS) - 1))
            else:
                row.extend(_record_cells(record))
        row.append(format_score(student.overall_average()))
        row.append(student.overall_grade_label())
        rows.append(row)
    return rows


def export_roster(path: str | Path, roster: Roster, registry: SubjectRegistry) -> Path:
    if roster.is_empty():
        raise ExportServiceError("データがありません")

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding=ENCODING, newline="") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(build_header(registry))
            writer.writerows(build_rows(roster, registry))
    except OSError as exc:
        logger.error("CSV export to %s failed: %s", target, exc)
        raise ExportServiceError(f"エクスポートに失敗しました: {exc}") from exc

    logger.info("Exported %d students to %s", len(roster), target)
    return target.resolve()
