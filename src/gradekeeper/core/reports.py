from __future__ import annotations

from gradekeeper.core.formatting import (
    format_optional_score,
    format_optional_whole,
    format_percent,
    format_score,
)
from gradekeeper.core.records import Student
from gradekeeper.core.roster import Roster

EMPTY_ROSTER_TEXT = "生徒が登録されていません"
DIVIDER = "─" * 17


def _student_lines(student: Student) -> list[str]:
    lines = [
        f"👤 {student.name}",
        f"  総合平均: {format_score(student.overall_average())}点",
        f"  評価: {student.overall_grade_label()}",
        "",
        "📝 科目別",
    ]
    for subject, record in student.subjects.items():
        lines.append(f"  {subject}")
        lines.append(
            f"    出席: {record.attended_days}/{record.total_days}回"
            f"（{format_percent(record.attendance_rate())}）"
        )
        lines.append(
            f"    出席点: {format_score(record.attendance_score())}"
            f"  テスト: {format_optional_whole(record.test_score)}"
        )
        lines.append(
            f"    総合: {format_optional_score(record.composite_score())}"
            f"  評価: {record.grade_label()}"
        )
    return lines


def build_stats_text(roster: Roster, selected: Student | None = None) -> str:
    """Text of the statistics panel: class figures, then the selected student."""
    if roster.is_empty():
        return EMPTY_ROSTER_TEXT

    lines = [
        "👥 全体統計",
        f"  生徒数: {len(roster)}名",
        f"  クラス平均: {format_score(roster.class_average())}点",
        "",
        "📊 評価分布",
    ]
    for label, count in roster.grade_distribution().items():
        lines.append(f"  {label}: {count}名")

    if selected is not None and selected.subjects:
        lines.append("")
        lines.append(DIVIDER)
        lines.extend(_student_lines(selected))

    return "\n".join(lines)
