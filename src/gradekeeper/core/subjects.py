from __future__ import annotations

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class SubjectConfigError(ValueError):
    pass


class SubjectRegistry:
    """
    Subject name -> total class sessions, in display order.
    Shared by every student; records copy total_days when they are created.
    """

    def __init__(self) -> None:
        self._total_days: dict[str, int] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, int]]) -> "SubjectRegistry":
        registry = cls()
        for name, total_days in pairs:
            registry.add(name, total_days)
        return registry

    @staticmethod
    def _check_days(total_days: int) -> None:
        if total_days <= 0:
            raise SubjectConfigError("Total days must be greater than 0")

    def add(self, name: str, total_days: int) -> None:
        name = name.strip()
        if not name:
            raise SubjectConfigError("Subject name is required")
        if name in self._total_days:
            raise SubjectConfigError(f"Subject already exists: {name}")
        self._check_days(total_days)
        self._total_days[name] = total_days
        logger.info("Added subject %s (%d days)", name, total_days)

    def remove(self, name: str) -> None:
        # student records for the subject are left in place
        if self._total_days.pop(name, None) is not None:
            logger.info("Removed subject %s", name)

    def set_total_days(self, name: str, total_days: int) -> None:
        if name not in self._total_days:
            raise SubjectConfigError(f"Unknown subject: {name}")
        self._check_days(total_days)
        self._total_days[name] = total_days

    def total_days(self, name: str, default: int = 0) -> int:
        return self._total_days.get(name, default)

    def names(self) -> list[str]:
        return list(self._total_days)

    def items(self) -> list[tuple[str, int]]:
        return list(self._total_days.items())

    def __contains__(self, name: object) -> bool:
        return name in self._total_days

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._total_days))

    def __len__(self) -> int:
        return len(self._total_days)
