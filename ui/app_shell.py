# ui/app_shell.py
from __future__ import annotations

from datetime import date

import flet as ft

from core.logs import get_logger
from core.settings import UI
from services.app_state import AppState
from ui import compat
from ui.dialogs import close_alert_dialog, open_confirm_checkin
from ui.pages.heatmap import HeatmapPage

logger = get_logger("ui")


class AppShell:
    def __init__(self, page: ft.Page, state: AppState):
        self.page = page
        self.state = state

        # window basics
        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START
        self.page.bgcolor = UI.theme.page_bg

        # --- header: title + new project form ---
        self.new_project_tf = ft.TextField(
            hint_text="新建项目名称",
            dense=True,
            width=220,
            on_submit=self.on_add_project,
        )
        self.add_btn = ft.FilledButton("添加", icon=ft.Icons.ADD, on_click=self.on_add_project)

        header = ft.Row(
            [
                ft.Column(
                    [
                        ft.Text(UI.app_title, size=24, weight=ft.FontWeight.BOLD),
                        ft.Text(UI.subtitle, size=13, color=UI.theme.text_subtle),
                    ],
                    spacing=4,
                ),
                ft.Row([self.new_project_tf, self.add_btn], spacing=8),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
            wrap=True,
        )

        # --- project switcher ---
        self.projects_holder = ft.Container()
        projects_card = ft.Card(content=ft.Container(self.projects_holder, padding=12))

        # --- pages ---
        self._heatmap = HeatmapPage(self)

        self.root = ft.Container(
            padding=ft.padding.symmetric(horizontal=24, vertical=20),
            content=ft.Column(
                [header, projects_card, self._heatmap.view],
                spacing=16,
                scroll=ft.ScrollMode.AUTO,
            ),
            expand=True,
        )

        self.state.subscribe(self._on_commit)

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.add(self.root)
        self.refresh()

    def refresh(self):
        self._render_projects()
        self._heatmap.load()
        self.page.update()

    def _on_commit(self, aggregate: str):
        logger.debug("Redraw after %s commit", aggregate)
        self.refresh()

    # ---------- projects ----------
    def _render_projects(self):
        chips = []
        for project in self.state.projects:
            is_active = project.id == self.state.active_id
            if is_active:
                btn = ft.FilledButton(project.name)
            else:
                btn = ft.OutlinedButton(project.name)
            btn.on_click = lambda e, pid=project.id: self.on_select_project(pid)
            btn.data = project.id
            chips.append(btn)
        self.projects_holder.content = compat.wrap_row(chips)

    def on_select_project(self, project_id: str):
        try:
            self.state.select_project(project_id)
        except Exception as exc:
            logger.exception("Project switch failed")
            self.toast(f"切换失败：{exc}")

    def on_add_project(self, e=None):
        name = self.new_project_tf.value or ""
        try:
            project = self.state.add_project(name)
        except Exception as exc:
            logger.exception("Project create failed")
            self.toast(f"添加失败：{exc}")
            return
        if project is None:
            self.toast("请输入项目名称")
            return
        self.new_project_tf.value = ""
        self.page.update()

    # ---------- check-in dialog ----------
    def open_checkin_dialog(self, day: date):
        pending = self.state.request_toggle(day)
        if pending is None:
            return
        key, status = self.state.pending_status()
        open_confirm_checkin(
            self.page,
            key=key,
            status=status,
            on_confirm=self.on_confirm_checkin,
            on_cancel=self.on_cancel_checkin,
        )

    def on_confirm_checkin(self):
        try:
            self.state.confirm_toggle()
        except Exception as exc:
            logger.exception("Check-in toggle failed")
            self.toast(f"打卡失败：{exc}")
        finally:
            close_alert_dialog(self.page)

    def on_cancel_checkin(self):
        self.state.cancel_toggle()
        close_alert_dialog(self.page)

    # ---------- helpers ----------
    def toast(self, text: str):
        compat.show_snack(self.page, text)
