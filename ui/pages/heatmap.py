# daka/ui/pages/heatmap.py
from __future__ import annotations

from datetime import date
from typing import List

import flet as ft

from core.settings import UI
from helpers.datetime_utils import weekday_labels
from models.checkin import DayCell
from services.app_state import STATUS_CHECKED, STATUS_UNCHECKED
from ui import compat

# ===== settings =====
HEAT_UI = UI.heatmap
THEME = UI.theme

CELL = HEAT_UI.cell_size
GAP = HEAT_UI.cell_spacing
LABEL_W = HEAT_UI.label_column_width
LEVEL_COLORS = THEME.level_colors


class HeatmapPage:
    """
    Contribution graph of the active project.
    - One column per week, Sunday on top.
    - Future cells are drawn faded and cannot be clicked.
    - A click opens the confirm dialog through the app shell.
    """

    def __init__(self, app):
        self.app = app
        self.state = app.state

        self.month_row = ft.Row(spacing=GAP)
        self.grid_row = ft.Row(spacing=GAP, vertical_alignment=ft.CrossAxisAlignment.START)
        self.stat_total = ft.Text("0", size=22, weight=ft.FontWeight.BOLD)
        self.stat_recent = ft.Text("暂无", size=22, weight=ft.FontWeight.BOLD)
        self.stat_streak = ft.Text("0", size=22, weight=ft.FontWeight.BOLD)

        weekday_column = ft.Column(
            [
                ft.Container(ft.Text(label, size=10, color=THEME.text_subtle), height=CELL,
                             alignment=ft.alignment.center_left)
                for label in weekday_labels()
            ],
            spacing=GAP,
            width=LABEL_W,
        )

        graph = ft.Column(
            [
                ft.Row([ft.Container(width=LABEL_W), self.month_row], spacing=GAP),
                ft.Row([weekday_column, self.grid_row], spacing=GAP,
                       vertical_alignment=ft.CrossAxisAlignment.START),
            ],
            spacing=4,
        )

        graph_card = ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Row([graph], scroll=ft.ScrollMode.AUTO),
                        self._legend(),
                        ft.Text("点击格子查看详情并确认打卡，数据已保存在本地。",
                                size=12, color=THEME.text_subtle),
                    ],
                    spacing=12,
                ),
            )
        )

        stats_row = ft.Row(
            [
                self._stat_box("累计打卡", self.stat_total),
                self._stat_box("最近打卡", self.stat_recent),
                self._stat_box("连续天数", self.stat_streak),
            ],
            spacing=12,
        )

        self.view = ft.Column([graph_card, stats_row], spacing=16)

    # ---------- Rendering ----------
    def load(self):
        today = self.state.today()
        weeks = self.state.week_grid(today)
        labels = self.state.month_labels(weeks)
        cells = self.state.cells(weeks, today)

        self.month_row.controls = [
            ft.Container(ft.Text(label.label, size=10, color=THEME.text_subtle, no_wrap=True), width=CELL)
            for label in labels
        ]
        self.grid_row.controls = [self._week_column(week) for week in cells]

        stats = self.state.stats(today)
        self.stat_total.value = str(stats.total)
        self.stat_recent.value = stats.most_recent or "暂无"
        self.stat_streak.value = str(stats.streak)

    def _week_column(self, week: List[DayCell]) -> ft.Control:
        return ft.Column([self._cell(cell) for cell in week], spacing=GAP)

    def _cell(self, cell: DayCell) -> ft.Control:
        status = STATUS_CHECKED if cell.is_checked else STATUS_UNCHECKED
        return ft.Container(
            width=CELL,
            height=CELL,
            border_radius=HEAT_UI.cell_radius,
            bgcolor=LEVEL_COLORS[cell.level],
            opacity=HEAT_UI.future_opacity if cell.is_future else 1.0,
            tooltip=f"{cell.key}\n{status}",
            disabled=cell.is_future,
            on_click=None if cell.is_future else (lambda e, d=cell.day: self._on_cell_click(d)),
            data=cell.key,
        )

    def _on_cell_click(self, day: date):
        self.app.open_checkin_dialog(day)

    def _legend(self) -> ft.Control:
        swatches = [
            ft.Container(width=CELL, height=CELL, border_radius=HEAT_UI.cell_radius, bgcolor=color)
            for color in LEVEL_COLORS
        ]
        return ft.Row(
            [
                ft.Text("少", size=11, color=THEME.text_subtle),
                ft.Row(swatches, spacing=GAP),
                ft.Text("多", size=11, color=THEME.text_subtle),
            ],
            spacing=6,
        )

    def _stat_box(self, label: str, value: ft.Text) -> ft.Control:
        return ft.Container(
            expand=True,
            padding=ft.padding.symmetric(horizontal=16, vertical=12),
            border_radius=10,
            bgcolor=ft.Colors.SURFACE,
            border=ft.border.all(1, compat.with_opacity(0.08, ft.Colors.ON_SURFACE)),
            content=ft.Column(
                [ft.Text(label, size=12, color=THEME.text_subtle), value],
                spacing=4,
            ),
        )
