# daka/storage/db.py
from sqlmodel import Session, create_engine

from core.settings import BACKUP, DB_PATH
from storage.backup import ensure_daily_backup
from storage.store import init_store


_engine = create_engine(f"sqlite:///{DB_PATH.as_posix()}", echo=False)


def init_db():
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    init_store(_engine)
    if BACKUP.enabled:
        ensure_daily_backup(DB_PATH, BACKUP.directory, keep_days=BACKUP.keep_days)


def get_engine():
    return _engine


def get_session() -> Session:
    return Session(_engine)
