from dataclasses import dataclass, field
from typing import Optional

from gradekeeper.core.records import Student
from gradekeeper.core.roster import Roster
from gradekeeper.core.subjects import SubjectRegistry
from gradekeeper.services.sample_data import default_registry, seed_roster


@dataclass
class AppState:
    registry: SubjectRegistry = field(default_factory=default_registry)
    roster: Roster = field(default_factory=Roster)
    selected_id: Optional[str] = None

    @property
    def selected(self) -> Optional[Student]:
        return self.roster.get(self.selected_id)

    def select(self, student_id: Optional[str]) -> None:
        self.selected_id = student_id

    def add_subject(self, name: str, total_days: int) -> None:
        """Register a subject; records kept from an earlier subject of the same name are re-counted."""
        self.registry.add(name, total_days)
        self.roster.apply_total_days(name.strip(), total_days)

    def set_subject_days(self, name: str, total_days: int) -> None:
        self.registry.set_total_days(name, total_days)
        self.roster.apply_total_days(name, total_days)

    def remove_selected(self) -> None:
        if self.selected_id is None:
            return
        self.roster.remove_student(self.selected_id)
        self.selected_id = None


def create_app_state(seed: bool = True) -> AppState:
    state = AppState()
    if seed:
        seed_roster(state.roster, state.registry)
    return state
