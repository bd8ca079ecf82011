"""Key-value blob store backed by SQLite."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from sqlmodel import Field, SQLModel, Session, select


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BlobRecord(SQLModel, table=True):
    """One serialized value stored under a string key."""

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=_utcnow)


STORE_TABLES = [BlobRecord.__table__]


def init_store(engine) -> None:
    """Create the blob table on ``engine`` if it is missing."""

    SQLModel.metadata.create_all(engine, tables=STORE_TABLES)


class BlobStore:
    """Opaque load/save of text blobs, one row per key."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def load(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            row = session.get(BlobRecord, key)
            return row.value if row else None

    def save(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            row = session.get(BlobRecord, key)
            if row is None:
                row = BlobRecord(key=key, value=value)
            else:
                row.value = value
                row.updated_at = _utcnow()
            session.add(row)
            session.commit()

    def delete(self, key: str) -> None:
        with self._session_factory() as session:
            row = session.get(BlobRecord, key)
            if row is not None:
                session.delete(row)
                session.commit()

    def keys(self) -> Iterable[str]:
        with self._session_factory() as session:
            return [row.key for row in session.exec(select(BlobRecord))]


__all__ = ["BlobRecord", "BlobStore", "STORE_TABLES", "init_store"]
