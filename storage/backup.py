"""Daily copies of the check-in database."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from pathlib import Path
from shutil import copy2
from typing import List, Tuple

from core.logs import get_logger

logger = get_logger("backup")


def _backup_date(path: Path, prefix: str) -> date | None:
    stem = path.stem
    if not stem.startswith(prefix):
        return None
    try:
        return datetime.strptime(stem[len(prefix) :], "%Y-%m-%d").date()
    except ValueError:
        return None


def list_backups(db_path: str | Path, backup_dir: str | Path) -> List[Tuple[date, Path]]:
    """Dated backups of ``db_path`` found in ``backup_dir``, oldest first."""

    db_file = Path(db_path)
    backups = Path(backup_dir)
    if not backups.is_dir():
        return []
    prefix = f"{db_file.stem}_"
    found = []
    for file in backups.glob(f"{db_file.stem}_*{db_file.suffix}"):
        stamp = _backup_date(file, prefix)
        if stamp is not None:
            found.append((stamp, file))
    return sorted(found)


def ensure_daily_backup(
    db_path: str | Path,
    backup_dir: str | Path,
    *,
    keep_days: int = 7,
) -> Path | None:
    """Copy ``db_path`` once per day and drop copies older than ``keep_days``."""

    db_file = Path(db_path)
    if not db_file.exists():
        return None

    backups = Path(backup_dir)
    backups.mkdir(parents=True, exist_ok=True)

    today = datetime.now().date()
    destination = backups / f"{db_file.stem}_{today.isoformat()}{db_file.suffix}"

    created_path: Path | None = None
    if not destination.exists():
        copy2(db_file, destination)
        created_path = destination
        logger.info("Backup written to %s", destination)

    if keep_days > 0:
        cutoff = today - timedelta(days=keep_days - 1)
        for stamp, file in list_backups(db_file, backups):
            if stamp >= cutoff:
                continue
            try:
                file.unlink()
                logger.info("Old backup removed: %s", file.name)
            except OSError as exc:
                logger.warning("Could not remove backup %s: %s", file, exc)

    return created_path


__all__ = ["ensure_daily_backup", "list_backups"]
