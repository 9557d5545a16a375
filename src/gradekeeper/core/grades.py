from __future__ import annotations

import math

ATTENDANCE_THRESHOLD = 0.8
ATTENDANCE_WEIGHT = 0.5
TEST_WEIGHT = 0.5

ATTENDANCE_FAIL = "不可(出席)"
FAIL = "不可"
NO_GRADE = "-"

# (lower bound, label); lower bounds are inclusive
GRADE_BANDS: list[tuple[float, str]] = [
    (90, "秀"),
    (80, "優"),
    (70, "良"),
    (60, "可"),
]

GRADE_ORDER: tuple[str, ...] = ("秀", "優", "良", "可", FAIL)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_0_100(value: float) -> float:
    return clamp(value, 0.0, 100.0)


def score_to_grade(score: float) -> str:
    """Map a score on the 0-100 composite scale to its grade label."""
    if math.isnan(score):
        return FAIL
    for low, label in GRADE_BANDS:
        if score >= low:
            return label
    return FAIL


def grade_rank(label: str) -> int:
    """Position of a label in GRADE_ORDER; attendance failures rank with 不可."""
    if label == ATTENDANCE_FAIL:
        label = FAIL
    try:
        return GRADE_ORDER.index(label)
    except ValueError as exc:
        raise ValueError(f"Unsupported grade label: {label}") from exc


def blend(attendance_score: float, test_score: float) -> float:
    return attendance_score * ATTENDANCE_WEIGHT + test_score * TEST_WEIGHT
