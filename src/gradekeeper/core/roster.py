from __future__ import annotations

import logging
from typing import Iterator

from gradekeeper.core.grades import GRADE_ORDER
from gradekeeper.core.records import Student

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    pass


class Roster:
    """Students of the session, in registration order."""

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}

    def add_student(self, student_id: str, name: str) -> Student:
        student_id = student_id.strip()
        name = name.strip()
        if not student_id:
            raise RosterError("Student ID is required")
        if not name:
            raise RosterError("Student name is required")
        if student_id in self._students:
            raise RosterError(f"Student ID already registered: {student_id}")
        student = Student(student_id=student_id, name=name)
        self._students[student_id] = student
        logger.info("Registered student %s", student)
        return student

    def remove_student(self, student_id: str) -> None:
        try:
            student = self._students.pop(student_id)
        except KeyError as exc:
            raise RosterError(f"Unknown student: {student_id}") from exc
        logger.info("Removed student %s", student)

    def get(self, student_id: str | None) -> Student | None:
        if student_id is None:
            return None
        return self._students.get(student_id)

    def next_student_id(self) -> str:
        # lowest unused number; deletions leave gaps
        number = 1
        while f"S{number:03d}" in self._students:
            number += 1
        return f"S{number:03d}"

    def is_empty(self) -> bool:
        return not self._students

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students.values()))

    def __len__(self) -> int:
        return len(self._students)

    def class_average(self) -> float:
        # students without any test score count as 0.0
        if not self._students:
            return 0.0
        return sum(s.overall_average() for s in self._students.values()) / len(self._students)

    def grade_distribution(self) -> dict[str, int]:
        counts = {label: 0 for label in GRADE_ORDER}
        for student in self._students.values():
            counts[student.overall_grade_label()] += 1
        return {label: count for label, count in counts.items() if count > 0}

    def apply_total_days(self, subject: str, total_days: int) -> None:
        """Propagate a changed session count to records created earlier."""
        for student in self._students.values():
            record = student.get_record(subject)
            if record is not None:
                record.retotal(total_days)
