# daka/models/checkin.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Dict, FrozenSet, Iterable, Iterator, Optional


class CheckinPartition(Mapping):
    """Immutable mapping of project id -> frozenset of checked-in day keys.

    A day is checked in exactly when its key is in the project's set. Projects
    whose set is empty are not stored, so removing the last key of a project
    and never having checked in are indistinguishable.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping] = None):
        cleaned: Dict[str, FrozenSet[str]] = {}
        for project_id, keys in (data or {}).items():
            frozen = frozenset(keys)
            if frozen:
                cleaned[project_id] = frozen
        self._data = cleaned

    def __getitem__(self, project_id: str) -> FrozenSet[str]:
        return self._data[project_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        inner = ", ".join(f"{pid!r}: {sorted(keys)!r}" for pid, keys in self._data.items())
        return f"CheckinPartition({{{inner}}})"

    def keys_for(self, project_id: str) -> FrozenSet[str]:
        return self._data.get(project_id, frozenset())

    def replace(self, project_id: str, keys: Iterable[str]) -> "CheckinPartition":
        """Return a copy with ``project_id``'s set swapped for ``keys``."""

        data = dict(self._data)
        data[project_id] = frozenset(keys)
        return CheckinPartition(data)

    def to_dict(self) -> Dict[str, Dict[str, bool]]:
        return {pid: {key: True for key in sorted(keys)} for pid, keys in self._data.items()}


@dataclass(frozen=True)
class CheckinStats:
    total: int
    most_recent: Optional[str]
    streak: int


@dataclass(frozen=True)
class DayCell:
    """Render state of one heatmap square."""

    day: date
    key: str
    is_future: bool
    is_checked: bool
    level: int


__all__ = ["CheckinPartition", "CheckinStats", "DayCell"]
