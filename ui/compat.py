import flet as ft

HAS_WRAP = hasattr(ft, "Wrap")
HAS_PAGE_OPEN = hasattr(ft.Page, "open")
COLORS = getattr(ft, "Colors", None) or ft.colors


def wrap_row(controls, spacing=8, run_spacing=8):
    if HAS_WRAP:
        return ft.Wrap(controls=controls, spacing=spacing, run_spacing=run_spacing)
    return ft.Row(controls=controls, wrap=True, spacing=spacing, run_spacing=run_spacing)


def with_opacity(opacity: float, color: str) -> str:
    return COLORS.with_opacity(opacity, color)


def show_dialog(page: ft.Page, dlg: ft.AlertDialog):
    if HAS_PAGE_OPEN:
        page.open(dlg)
        return
    page.dialog = dlg
    dlg.open = True
    page.update()


def hide_dialog(page: ft.Page, dlg: ft.AlertDialog | None):
    if dlg is None:
        return
    if HAS_PAGE_OPEN:
        page.close(dlg)
        return
    dlg.open = False
    page.update()


def show_snack(page: ft.Page, text: str):
    bar = ft.SnackBar(ft.Text(text))
    if HAS_PAGE_OPEN:
        page.open(bar)
        return
    page.snack_bar = bar
    bar.open = True
    page.update()
