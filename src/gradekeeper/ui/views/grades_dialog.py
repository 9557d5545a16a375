from typing import Callable, Dict, Tuple
import flet as ft

from gradekeeper.core.entry import preview_entry
from gradekeeper.core.formatting import format_whole
from gradekeeper.core.records import Student
from gradekeeper.state.app_state import AppState
from gradekeeper.ui.theme import attendance_color, grade_color

HEADERS = [
    ("科目", 90),
    ("総授業数", 70),
    ("出席日数", 80),
    ("出席率", 60),
    ("出席点", 60),
    ("テスト点", 80),
    ("総合点", 60),
    ("評価", 80),
]


def _header_row() -> ft.Row:
    return ft.Row(
        controls=[ft.Text(title, width=width, weight=ft.FontWeight.BOLD) for title, width in HEADERS]
    )


def open_grades_dialog(
    page: ft.Page,
    app_state: AppState,
    student: Student,
    on_saved: Callable[[], None],
) -> None:
    """Attendance and test entry for every configured subject, with a live preview."""
    field_map: Dict[str, Tuple[ft.TextField, ft.TextField]] = {}
    rows = [_header_row(), ft.Divider()]

    for subject, total_days in app_state.registry.items():
        # records are only created when the dialog is committed
        record = student.get_record(subject)
        attended = ft.TextField(
            value=str(record.attended_days) if record else "0",
            hint_text=f"0〜{total_days}",
            width=HEADERS[2][1],
            dense=True,
        )
        test = ft.TextField(
            value=format_whole(record.test_score) if record and record.test_score is not None else "",
            hint_text="0〜100",
            width=HEADERS[5][1],
            dense=True,
        )
        rate = ft.Text(width=HEADERS[3][1])
        points = ft.Text(width=HEADERS[4][1])
        composite = ft.Text(width=HEADERS[6][1], weight=ft.FontWeight.BOLD)
        grade = ft.Text(width=HEADERS[7][1], weight=ft.FontWeight.BOLD)

        def make_preview_handler(total_days=total_days, attended=attended, test=test,
                                 rate=rate, points=points, composite=composite, grade=grade):
            def refresh_preview(e=None) -> None:
                preview = preview_entry(total_days, attended.value or "", test.value or "")
                rate.value = preview.rate
                rate.color = attendance_color(preview.sufficient)
                points.value = preview.attendance_points
                composite.value = preview.composite
                grade.value = preview.grade
                grade.color = grade_color(preview.grade)
                if e is not None:
                    page.update()

            return refresh_preview

        handler = make_preview_handler()
        attended.on_change = handler
        test.on_change = handler
        handler()

        field_map[subject] = (attended, test)
        rows.append(
            ft.Row(
                controls=[
                    ft.Text(subject, width=HEADERS[0][1]),
                    ft.Text(f"{total_days}回", width=HEADERS[1][1]),
                    attended,
                    rate,
                    points,
                    test,
                    composite,
                    grade,
                ]
            )
        )

    def on_save(_):
        for subject, (attended, test) in field_map.items():
            # the subject may have been removed while the dialog was open
            if subject not in app_state.registry:
                continue
            record = student.get_or_create_record(subject, app_state.registry)
            record.apply_entry(attended.value or "", test.value or "")
        page.close(dialog)
        on_saved()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(f"成績編集 — {student.name}"),
        content=ft.Container(
            width=720,
            height=340,
            content=ft.Column(
                scroll=ft.ScrollMode.AUTO,
                controls=[ft.Text("各科目の出席日数とテスト点を入力してください"), *rows],
            ),
        ),
        actions=[
            ft.TextButton("キャンセル", on_click=lambda _: page.close(dialog)),
            ft.ElevatedButton("OK", on_click=on_save),
        ],
    )
    page.open(dialog)
