from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gradekeeper.core.grades import (
    ATTENDANCE_FAIL,
    ATTENDANCE_THRESHOLD,
    FAIL,
    NO_GRADE,
    blend,
    score_to_grade,
)
from gradekeeper.core.parsing import parse_attended_days, parse_test_score
from gradekeeper.core.subjects import SubjectConfigError, SubjectRegistry

logger = logging.getLogger(__name__)


@dataclass
class SubjectRecord:
    """Attendance and test data of one student in one subject."""

    total_days: int
    attended_days: int = 0
    test_score: float | None = None

    def attendance_rate(self) -> float:
        if self.total_days <= 0:
            return 0.0
        return self.attended_days / self.total_days

    def attendance_score(self) -> float:
        return self.attendance_rate() * 100.0

    def has_sufficient_attendance(self) -> bool:
        return self.attendance_rate() >= ATTENDANCE_THRESHOLD

    def composite_score(self) -> float | None:
        # None means ungraded, which is not the same as a zero
        if self.test_score is None:
            return None
        return blend(self.attendance_score(), self.test_score)

    def grade_label(self) -> str:
        if not self.has_sufficient_attendance():
            return ATTENDANCE_FAIL
        composite = self.composite_score()
        if composite is None:
            return NO_GRADE
        return score_to_grade(composite)

    def apply_entry(self, attended_text: str, test_text: str) -> None:
        """
        Commit typed values. Out-of-range numbers are clamped; text that does
        not parse leaves the stored value untouched.
        """
        try:
            self.attended_days = parse_attended_days(attended_text, self.total_days)
        except ValueError:
            logger.debug("Ignoring attended days entry %r", attended_text)
        try:
            self.test_score = parse_test_score(test_text)
        except ValueError:
            logger.debug("Ignoring test score entry %r", test_text)

    def retotal(self, total_days: int) -> None:
        self.total_days = total_days
        self.attended_days = max(0, min(self.attended_days, total_days))


@dataclass
class Student:
    student_id: str
    name: str
    subjects: dict[str, SubjectRecord] = field(default_factory=dict)

    def get_record(self, subject: str) -> SubjectRecord | None:
        return self.subjects.get(subject)

    def get_or_create_record(self, subject: str, registry: SubjectRegistry) -> SubjectRecord:
        record = self.subjects.get(subject)
        if record is None:
            if subject not in registry:
                raise SubjectConfigError(f"Unknown subject: {subject}")
            record = SubjectRecord(total_days=registry.total_days(subject))
            self.subjects[subject] = record
        return record

    def remove_subject(self, subject: str) -> None:
        self.subjects.pop(subject, None)

    def _composites(self) -> list[float]:
        composites = []
        for record in self.subjects.values():
            composite = record.composite_score()
            if composite is not None:
                composites.append(composite)
        return composites

    def overall_average(self) -> float:
        """Mean composite over subjects with a test score; 0.0 when there are none."""
        composites = self._composites()
        if not composites:
            return 0.0
        return sum(composites) / len(composites)

    def max_composite(self) -> float:
        return max(self._composites(), default=0.0)

    def min_composite(self) -> float:
        return min(self._composites(), default=0.0)

    def overall_grade_label(self) -> str:
        # a single subject short on attendance fails the whole student
        if any(not r.has_sufficient_attendance() for r in self.subjects.values()):
            return FAIL
        return score_to_grade(self.overall_average())

    def __str__(self) -> str:
        return f"{self.student_id} - {self.name}"
