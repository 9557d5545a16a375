from typing import Callable
import flet as ft

from gradekeeper.core.roster import RosterError
from gradekeeper.state.app_state import AppState


def open_add_student_dialog(page: ft.Page, app_state: AppState, on_added: Callable[[str], None]) -> None:
    student_id = ft.TextField(label="学籍番号", value=app_state.roster.next_student_id(), width=260)
    name = ft.TextField(label="氏名", hint_text="例：山田 太郎", width=260, autofocus=True)
    status = ft.Text(color=ft.Colors.RED_400)

    def on_add(_):
        try:
            student = app_state.roster.add_student(student_id.value or "", name.value or "")
        except RosterError as exc:
            status.value = str(exc)
            page.update()
            return
        page.close(dialog)
        on_added(student.student_id)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("生徒を追加"),
        content=ft.Column(
            tight=True,
            controls=[ft.Text("新しい生徒の情報を入力してください"), student_id, name, status],
        ),
        actions=[
            ft.TextButton("キャンセル", on_click=lambda _: page.close(dialog)),
            ft.ElevatedButton("追加", on_click=on_add),
        ],
    )
    page.open(dialog)
