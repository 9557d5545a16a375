from __future__ import annotations

from pathlib import Path

import flet as ft

from gradekeeper.config.settings import Settings, settings as default_settings
from gradekeeper.core.roster import RosterError
from gradekeeper.services.csv_export import ExportServiceError, default_export_filename, export_roster
from gradekeeper.state.app_state import AppState, create_app_state
from gradekeeper.ui.theme import BACKGROUND, BUTTON_COLORS, MUTED, PRIMARY
from gradekeeper.ui.views.grades_dialog import open_grades_dialog
from gradekeeper.ui.views.roster_view import build_roster_table
from gradekeeper.ui.views.stats_view import build_stats_view
from gradekeeper.ui.views.student_dialog import open_add_student_dialog
from gradekeeper.ui.views.subjects_dialog import open_subjects_dialog


SELECT_STUDENT = "生徒を選択してください"
FORMULA = (
    "総合点 ＝ 出席点（出席日数÷総授業日数×100）×50% ＋ テスト点×50%"
    "　／　出席率80%未満・総合59点以下 → 不可"
)


class GradeKeeperApp:
    def __init__(self, page: ft.Page, app_settings: Settings = default_settings) -> None:
        self.page = page
        self.page.title = "📚 成績管理アプリ"
        self.page.bgcolor = BACKGROUND
        self.page.window.width = 1280
        self.page.window.height = 740
        self.page.window.min_width = 960
        self.page.window.min_height = 580
        self.settings = app_settings
        self.state: AppState = create_app_state(seed=app_settings.seed_sample_data)

        self.table_container = ft.Container(expand=3)
        self.stats_container = ft.Container(expand=1, padding=12)
        self.export_picker = ft.FilePicker(on_result=self.handle_export_result)
        self.page.overlay.append(self.export_picker)

    def run(self) -> None:
        self.page.add(
            ft.Column(
                expand=True,
                controls=[
                    self.header(),
                    self.toolbar(),
                    ft.Row(
                        expand=True,
                        vertical_alignment=ft.CrossAxisAlignment.START,
                        controls=[
                            ft.Column([self.table_container], expand=3, scroll=ft.ScrollMode.AUTO),
                            ft.VerticalDivider(width=1),
                            self.stats_container,
                        ],
                    ),
                    ft.Text("💡 行を長押しで成績編集 ／ 赤字＝出席不足（8割未満）", color=MUTED, size=12),
                ],
            )
        )
        self.refresh_all()

    def header(self) -> ft.Control:
        return ft.Container(
            bgcolor=PRIMARY,
            padding=ft.padding.symmetric(vertical=16, horizontal=24),
            content=ft.Row(
                controls=[
                    ft.Text("📚", size=28),
                    ft.Column(
                        spacing=3,
                        controls=[
                            ft.Text("成績管理システム", size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE),
                            ft.Text(FORMULA, size=12, color=MUTED),
                        ],
                    ),
                ]
            ),
        )

    def toolbar(self) -> ft.Control:
        def button(text: str, key: str, handler) -> ft.ElevatedButton:
            return ft.ElevatedButton(text, bgcolor=BUTTON_COLORS[key], color=ft.Colors.WHITE, on_click=handler)

        return ft.Row(
            controls=[
                button("＋ 生徒追加", "add", self.handle_add_student),
                button("✏ 成績編集", "edit", lambda _: self.edit_grades(self.state.selected_id)),
                button("⚙ 科目管理", "subjects", self.handle_subjects),
                button("✕ 削除", "delete", self.handle_delete),
                ft.VerticalDivider(width=1),
                button("⬇ CSVエクスポート", "export", self.handle_export),
            ]
        )

    def refresh_all(self) -> None:
        self.table_container.content = build_roster_table(self.state, self.select_student, self.edit_grades)
        self.stats_container.content = build_stats_view(self.state)
        self.page.update()

    def show_alert(self, message: str, is_error: bool = False) -> None:
        dialog = ft.AlertDialog(
            title=ft.Text("エラー" if is_error else "情報"),
            content=ft.Text(message),
            actions=[ft.TextButton("OK", on_click=lambda _: self.page.close(dialog))],
        )
        self.page.open(dialog)

    def select_student(self, student_id: str) -> None:
        self.state.select(student_id)
        self.refresh_all()

    def edit_grades(self, student_id: str | None) -> None:
        student = self.state.roster.get(student_id)
        if student is None:
            self.show_alert(SELECT_STUDENT)
            return
        self.state.select(student.student_id)
        open_grades_dialog(self.page, self.state, student, self.refresh_all)

    def handle_add_student(self, _: ft.ControlEvent) -> None:
        def added(student_id: str) -> None:
            self.state.select(student_id)
            self.refresh_all()
            self.edit_grades(student_id)

        open_add_student_dialog(self.page, self.state, added)

    def handle_subjects(self, _: ft.ControlEvent) -> None:
        open_subjects_dialog(self.page, self.state, self.refresh_all)

    def handle_delete(self, _: ft.ControlEvent) -> None:
        student = self.state.selected
        if student is None:
            self.show_alert(SELECT_STUDENT)
            return

        def confirm(_: ft.ControlEvent) -> None:
            self.page.close(dialog)
            try:
                self.state.remove_selected()
            except RosterError as exc:
                self.show_alert(str(exc), is_error=True)
                return
            self.refresh_all()

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("削除確認"),
            content=ft.Text(f"{student.name} を削除しますか？"),
            actions=[
                ft.TextButton("いいえ", on_click=lambda _: self.page.close(dialog)),
                ft.ElevatedButton("はい", on_click=confirm),
            ],
        )
        self.page.open(dialog)

    def handle_export(self, _: ft.ControlEvent) -> None:
        if self.state.roster.is_empty():
            self.show_alert("データがありません")
            return
        export_dir = Path(self.settings.export_dir)
        self.export_picker.save_file(
            dialog_title="CSVファイルを保存",
            file_name=default_export_filename(),
            initial_directory=str(export_dir.resolve()) if export_dir.is_dir() else None,
            allowed_extensions=["csv"],
        )

    def handle_export_result(self, e: ft.FilePickerResultEvent) -> None:
        if not e.path:
            return
        try:
            saved = export_roster(e.path, self.state.roster, self.state.registry)
        except ExportServiceError as exc:
            self.show_alert(str(exc), is_error=True)
            return
        self.show_alert(f"CSVエクスポート完了！\n保存先: {saved}")


def main(page: ft.Page) -> None:
    GradeKeeperApp(page).run()
