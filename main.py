# daka/main.py
import os, sys
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import flet as ft

from core.logs import get_logger
from core.settings import APP_NAME, UI
from services.app_state import AppState
from storage.db import get_session, init_db
from storage.gateway import PersistenceGateway
from storage.store import BlobStore
from ui.app_shell import AppShell


def main(page: ft.Page):
    page.title = UI.app_title
    page.theme_mode = UI.theme_mode
    page.theme = ft.Theme(color_scheme_seed=UI.color_scheme_seed)
    page.padding = 0
    page.window_min_width = UI.window_min_width
    page.window_min_height = UI.window_min_height

    init_db()
    state = AppState.load(PersistenceGateway(BlobStore(get_session)))
    get_logger("app").info("%s started with %d projects", APP_NAME, len(state.projects))
    shell = AppShell(page, state)
    shell.mount()


def run():
    ft.app(target=main)


if __name__ == "__main__":
    run()
