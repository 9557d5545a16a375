from __future__ import annotations

from gradekeeper.core.roster import Roster
from gradekeeper.core.subjects import SubjectRegistry

DEFAULT_SUBJECTS: list[tuple[str, int]] = [
    ("数学", 20),
    ("英語", 18),
    ("国語", 20),
    ("理科", 16),
    ("社会", 15),
]

# (attended days, test score) per subject, in DEFAULT_SUBJECTS order
SAMPLE_STUDENTS: list[tuple[str, str, list[tuple[int, float]]]] = [
    ("S001", "山田 太郎", [(18, 85), (15, 90), (17, 80), (13, 88), (12, 75)]),
    ("S002", "鈴木 花子", [(20, 95), (18, 98), (19, 92), (16, 90), (15, 97)]),
    # 英語 and 理科 below 80% attendance
    ("S003", "佐藤 健", [(14, 55), (10, 60), (15, 65), (9, 50), (11, 58)]),
    ("S004", "田中 美咲", [(19, 78), (17, 82), (18, 88), (14, 76), (13, 80)]),
    ("S005", "渡辺 悠斗", [(16, 62), (14, 70), (18, 68), (12, 58), (12, 65)]),
]


def default_registry() -> SubjectRegistry:
    return SubjectRegistry.from_pairs(DEFAULT_SUBJECTS)


def seed_roster(roster: Roster, registry: SubjectRegistry) -> None:
    """Fill roster with the demo students, zipped against registry order."""
    for student_id, name, entries in SAMPLE_STUDENTS:
        student = roster.add_student(student_id, name)
        for subject, (attended, test_score) in zip(registry.names(), entries):
            record = student.get_or_create_record(subject, registry)
            record.attended_days = min(attended, record.total_days)
            record.test_score = float(test_score)
