from __future__ import annotations

from dataclasses import dataclass

from gradekeeper.core.formatting import PREVIEW_PLACEHOLDER, format_percent, format_score
from gradekeeper.core.parsing import parse_attended_days, parse_test_score
from gradekeeper.core.records import SubjectRecord


@dataclass(frozen=True)
class EntryPreview:
    rate: str = PREVIEW_PLACEHOLDER
    attendance_points: str = PREVIEW_PLACEHOLDER
    composite: str = PREVIEW_PLACEHOLDER
    grade: str = PREVIEW_PLACEHOLDER
    sufficient: bool | None = None


def preview_entry(total_days: int, attended_text: str, test_text: str) -> EntryPreview:
    """
    Recompute the figures shown next to the grade-entry fields.
    Nothing is stored; the result only reflects what apply_entry would commit.
    """
    try:
        attended = parse_attended_days(attended_text, total_days)
    except ValueError:
        return EntryPreview()

    record = SubjectRecord(total_days=total_days, attended_days=attended)
    rate = format_percent(record.attendance_rate())
    points = format_score(record.attendance_score())
    sufficient = record.has_sufficient_attendance()

    try:
        record.test_score = parse_test_score(test_text)
    except ValueError:
        return EntryPreview(rate=rate, attendance_points=points, sufficient=sufficient)

    composite = record.composite_score()
    return EntryPreview(
        rate=rate,
        attendance_points=points,
        composite=PREVIEW_PLACEHOLDER if composite is None else format_score(composite),
        grade=record.grade_label(),
        sufficient=sufficient,
    )
