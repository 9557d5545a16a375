from typing import Callable, Dict
import flet as ft

from gradekeeper.core.subjects import SubjectConfigError
from gradekeeper.state.app_state import AppState


def _parse_days(raw: str) -> int:
    days = int(raw.strip())
    if days <= 0:
        raise ValueError("Total days must be greater than 0")
    return days


def open_subjects_dialog(page: ft.Page, app_state: AppState, on_changed: Callable[[], None]) -> None:
    """Add, remove and re-count subjects. Removing a subject keeps student records."""
    registry = app_state.registry
    day_fields: Dict[str, ft.TextField] = {}
    existing = ft.Column(spacing=6)
    new_name = ft.TextField(label="科目名", width=160, dense=True)
    new_days = ft.TextField(label="総授業日数", width=110, dense=True)
    status = ft.Text(color=ft.Colors.RED_400)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def render_existing() -> None:
        existing.controls.clear()
        day_fields.clear()
        if not len(registry):
            existing.controls.append(ft.Text("科目が登録されていません"))
        for name, total_days in registry.items():
            field = ft.TextField(value=str(total_days), width=110, dense=True, suffix_text="回")
            day_fields[name] = field
            existing.controls.append(
                ft.Row(
                    controls=[
                        ft.Text(name, width=120),
                        field,
                        ft.TextButton("削除", on_click=lambda _, n=name: on_remove(n)),
                    ]
                )
            )

    def on_remove(name: str) -> None:
        registry.remove(name)
        set_status(f"「{name}」を削除しました。", is_error=False)
        render_existing()
        page.update()

    def on_add(_):
        try:
            app_state.add_subject(new_name.value or "", _parse_days(new_days.value or ""))
        except (SubjectConfigError, ValueError) as exc:
            set_status(f"追加できません: {exc}")
            page.update()
            return
        set_status(f"「{new_name.value.strip()}」を追加しました。", is_error=False)
        new_name.value = ""
        new_days.value = ""
        render_existing()
        page.update()

    def on_ok(_):
        for name, field in day_fields.items():
            if name not in registry:
                continue
            try:
                days = _parse_days(field.value or "")
            except ValueError:
                continue
            if days != registry.total_days(name):
                app_state.set_subject_days(name, days)
        page.close(dialog)
        on_changed()

    render_existing()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("科目管理"),
        content=ft.Container(
            width=460,
            height=360,
            content=ft.Column(
                scroll=ft.ScrollMode.AUTO,
                controls=[
                    ft.Text("登録済み科目", weight=ft.FontWeight.BOLD),
                    existing,
                    ft.Divider(),
                    ft.Text("新規科目を追加", weight=ft.FontWeight.BOLD),
                    ft.Row(controls=[new_name, new_days, ft.ElevatedButton("追加", on_click=on_add)]),
                    status,
                ],
            ),
        ),
        actions=[
            ft.TextButton("閉じる", on_click=lambda _: (page.close(dialog), on_changed())),
            ft.ElevatedButton("OK", on_click=on_ok),
        ],
    )
    page.open(dialog)
