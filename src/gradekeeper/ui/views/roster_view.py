from typing import Callable, List, Optional
import flet as ft

from gradekeeper.core.formatting import (
    PLACEHOLDER,
    format_optional_whole,
    format_percent,
    format_score,
)
from gradekeeper.core.records import Student, SubjectRecord
from gradekeeper.state.app_state import AppState
from gradekeeper.ui.theme import DANGER, grade_color, score_color


def _cell(text: str, color: Optional[str] = None, bold: bool = False) -> ft.DataCell:
    return ft.DataCell(
        ft.Text(text, color=color, weight=ft.FontWeight.BOLD if bold else None)
    )


def _score_cell(value: Optional[float], bold: bool = False) -> ft.DataCell:
    if value is None:
        return _cell(PLACEHOLDER)
    return _cell(format_score(value), color=score_color(value), bold=bold)


def _grade_cell(label: str) -> ft.DataCell:
    return _cell(label, color=grade_color(label), bold=True)


def _subject_cells(record: Optional[SubjectRecord]) -> List[ft.DataCell]:
    if record is None:
        return [_cell(PLACEHOLDER) for _ in range(5)]

    # red when attendance is under 80%
    attendance = None if record.has_sufficient_attendance() else DANGER
    test = record.test_score
    return [
        _cell(f"{record.attended_days}/{record.total_days}", color=attendance),
        _cell(format_percent(record.attendance_rate()), color=attendance),
        _cell(format_optional_whole(test), color=None if test is None else score_color(test)),
        _score_cell(record.composite_score(), bold=True),
        _grade_cell(record.grade_label()),
    ]


def build_columns(app_state: AppState) -> List[ft.DataColumn]:
    columns = [ft.DataColumn(ft.Text("学籍番号")), ft.DataColumn(ft.Text("氏名"))]
    for subject, total_days in app_state.registry.items():
        group = f"{subject}（全{total_days}回）"
        columns.extend(
            [
                ft.DataColumn(ft.Text(f"{group}\n出席日数")),
                ft.DataColumn(ft.Text("出席率")),
                ft.DataColumn(ft.Text("テスト"), numeric=True),
                ft.DataColumn(ft.Text("総合"), numeric=True),
                ft.DataColumn(ft.Text("評価")),
            ]
        )
    columns.extend([ft.DataColumn(ft.Text("総合平均"), numeric=True), ft.DataColumn(ft.Text("評価"))])
    return columns


def build_row(
    student: Student,
    app_state: AppState,
    on_select: Callable[[str], None],
    on_edit: Callable[[str], None],
) -> ft.DataRow:
    cells = [_cell(student.student_id), _cell(student.name)]
    for subject in app_state.registry:
        cells.extend(_subject_cells(student.get_record(subject)))
    cells.append(_score_cell(student.overall_average(), bold=True))
    cells.append(_grade_cell(student.overall_grade_label()))

    return ft.DataRow(
        cells=cells,
        selected=student.student_id == app_state.selected_id,
        on_select_changed=lambda _, sid=student.student_id: on_select(sid),
        on_long_press=lambda _, sid=student.student_id: on_edit(sid),
    )


def build_roster_table(
    app_state: AppState,
    on_select: Callable[[str], None],
    on_edit: Callable[[str], None],
) -> ft.Control:
    if app_state.roster.is_empty():
        return ft.Text("生徒が登録されていません。「＋ 生徒追加」から登録してください。")

    table = ft.DataTable(
        columns=build_columns(app_state),
        rows=[build_row(s, app_state, on_select, on_edit) for s in app_state.roster],
        show_checkbox_column=False,
        column_spacing=14,
        heading_row_height=56,
        border=ft.border.all(1, "#dce3ea"),
        border_radius=6,
    )
    return ft.Row(controls=[table], scroll=ft.ScrollMode.AUTO)
