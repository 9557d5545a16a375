from __future__ import annotations

import math

from gradekeeper.core.grades import clamp, clamp_0_100


def parse_attended_days(text: str, total_days: int) -> int:
    """
    Parse typed attendance and clamp it to [0, total_days].
    Raises ValueError for anything that is not an integer.
    """
    attended = int(text.strip())
    return int(clamp(attended, 0, max(total_days, 0)))


def parse_test_score(text: str) -> float | None:
    """
    Parse a typed test score.
    Blank text means "not entered" and returns None; numbers are clamped to
    [0, 100]. Raises ValueError for non-numeric, NaN or infinite input.
    """
    stripped = text.strip()
    if not stripped:
        return None
    score = float(stripped)
    if not math.isfinite(score):
        raise ValueError(f"Test score must be a finite number: {stripped}")
    return clamp_0_100(score)
