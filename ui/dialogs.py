import flet as ft

from ui import compat

_current: dict = {}


def open_alert_dialog(page: ft.Page, *, title: str, content: ft.Control, actions: list[ft.Control], on_dismiss=None):
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=content,
        actions=actions,
        actions_alignment=ft.MainAxisAlignment.END,
        on_dismiss=on_dismiss,
    )
    _current[id(page)] = dlg
    compat.show_dialog(page, dlg)
    return dlg


def close_alert_dialog(page: ft.Page):
    dlg = _current.pop(id(page), None)
    compat.hide_dialog(page, dlg)


def open_confirm_checkin(page: ft.Page, *, key: str, status: str, on_confirm, on_cancel):
    """确认打卡 dialog showing the picked day and its current state."""

    content = ft.Column(
        [
            ft.Text(f"日期：{key or '未选择'}"),
            ft.Text(f"当前状态：{status or '未选择'}"),
        ],
        spacing=8,
        tight=True,
    )
    actions = [
        ft.TextButton("取消", on_click=lambda e: on_cancel()),
        ft.FilledButton("确认", icon=ft.Icons.CHECK, on_click=lambda e: on_confirm()),
    ]
    return open_alert_dialog(
        page,
        title="确认打卡",
        content=content,
        actions=actions,
        on_dismiss=lambda e: on_cancel(),
    )
