import flet as ft

from gradekeeper.core.reports import build_stats_text
from gradekeeper.state.app_state import AppState
from gradekeeper.ui.theme import DANGER, LEGEND, PRIMARY, grade_color


def _card(controls) -> ft.Container:
    return ft.Container(
        content=ft.Column(controls=controls, spacing=5),
        padding=12,
        bgcolor=ft.Colors.WHITE,
        border_radius=8,
    )


def build_stats_view(app_state: AppState) -> ft.Control:
    legend_rows = [
        ft.Row(
            controls=[
                ft.Text(label, width=44, weight=ft.FontWeight.BOLD, color=grade_color(label)),
                ft.Text(description),
            ]
        )
        for label, description in LEGEND
    ]

    return ft.Column(
        scroll=ft.ScrollMode.AUTO,
        spacing=12,
        controls=[
            ft.Text("📊 統計情報", size=18, weight=ft.FontWeight.BOLD, color=PRIMARY),
            _card([ft.Text(build_stats_text(app_state.roster, app_state.selected), selectable=True)]),
            ft.Text("📋 評価基準", size=16, weight=ft.FontWeight.BOLD, color=PRIMARY),
            _card(legend_rows),
            _card(
                [
                    ft.Text("⚠ 不可の条件", weight=ft.FontWeight.BOLD, color=DANGER),
                    ft.Text("① 出席率 80% 未満"),
                    ft.Text("② 総合点 59点以下"),
                ]
            ),
            _card(
                [
                    ft.Text("📐 総合点の計算", weight=ft.FontWeight.BOLD),
                    ft.Text("出席点 = 出席日数÷総日数×100\n出席点×50% ＋ テスト×50%\n＝ 総合点（満点100）"),
                ]
            ),
        ],
    )
