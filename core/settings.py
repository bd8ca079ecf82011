"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(env or os.environ)
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = Path(environ.get("APPDATA") or home_dir / "Library" / "Application Support")
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


APP_NAME = "Daka"


DATA_DIR = get_default_data_dir(APP_NAME)
BACKUP_DIR = DATA_DIR / "backups"
LOG_DIR = DATA_DIR / "logs"

for _dir in (DATA_DIR, BACKUP_DIR, LOG_DIR):
    _dir.mkdir(parents=True, exist_ok=True)


DB_PATH = DATA_DIR / "daka.db"
LOG_PATH = LOG_DIR / "daka.log"

DEFAULT_PROJECT_ID = "default"
DEFAULT_PROJECT_NAME = "健身"


@dataclass(frozen=True)
class StorageKeys:
    projects: str = "daka-projects"
    checkins: str = "daka-checkins"


STORAGE_KEYS = StorageKeys()


@dataclass(frozen=True)
class ThemeColors:
    page_bg: str = "#F8FAFC"
    card_border: str = "#E2E8F0"
    text_subtle: str = "#64748B"
    # heatmap legend, from "no check-in" to "checked in"
    level_colors: tuple[str, ...] = (
        "#E2E8F0",
        "#A7F3D0",
        "#34D399",
        "#10B981",
        "#047857",
    )


@dataclass(frozen=True)
class HeatmapUISettings:
    total_days: int = 365
    cell_size: int = 12
    cell_spacing: int = 3
    cell_radius: int = 2
    label_column_width: int = 28
    future_opacity: float = 0.35


@dataclass(frozen=True)
class UISettings:
    app_title: str = "Daka 打卡"
    subtitle: str = "按项目记录每日打卡，形成可视化贡献图。"
    theme_mode: str = "light"
    color_scheme_seed: str = "#10B981"
    window_min_width: int = 960
    window_min_height: int = 560
    theme: ThemeColors = ThemeColors()
    heatmap: HeatmapUISettings = HeatmapUISettings()


UI = UISettings()


@dataclass(frozen=True)
class LogSettings:
    path: Path = LOG_PATH
    max_bytes: int = 1_000_000
    backup_count: int = 3
    level: str = "INFO"


LOGGING = LogSettings()


@dataclass(frozen=True)
class BackupSettings:
    enabled: bool = True
    directory: Path = BACKUP_DIR
    keep_days: int = 7


BACKUP = BackupSettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "BACKUP_DIR",
    "LOG_DIR",
    "DB_PATH",
    "LOG_PATH",
    "DEFAULT_PROJECT_ID",
    "DEFAULT_PROJECT_NAME",
    "STORAGE_KEYS",
    "UI",
    "LOGGING",
    "BACKUP",
    "get_default_data_dir",
]
