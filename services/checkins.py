# daka/services/checkins.py
"""Check-in operations over an immutable :class:`CheckinPartition`."""
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

from helpers.datetime_utils import DateLike, day_key, is_future, parse_day_key
from models.checkin import CheckinPartition, CheckinStats, DayCell

CHECKED_LEVEL = 4
EMPTY_LEVEL = 0


def toggle(partition: CheckinPartition, project_id: str, key: str) -> CheckinPartition:
    """Flip ``key`` for ``project_id`` and return the new partition.

    ``partition`` itself is never modified.
    """

    keys = partition.keys_for(project_id)
    if key in keys:
        return partition.replace(project_id, keys - {key})
    return partition.replace(project_id, keys | {key})


def is_checked(partition: CheckinPartition, project_id: str, key: str) -> bool:
    return key in partition.keys_for(project_id)


def total_count(partition: CheckinPartition, project_id: str) -> int:
    return len(partition.keys_for(project_id))


def most_recent(partition: CheckinPartition, project_id: str) -> Optional[str]:
    """Latest checked-in key, or ``None`` when the project has none."""

    keys = partition.keys_for(project_id)
    if not keys:
        return None
    return max(keys)


def current_streak(partition: CheckinPartition, project_id: str, today: DateLike) -> int:
    """Consecutive checked-in days ending at ``today`` (0 if today is missing)."""

    keys = partition.keys_for(project_id)
    streak = 0
    cursor = today
    while day_key(cursor) in keys:
        streak += 1
        cursor = cursor - timedelta(days=1)
    return streak


def longest_streak(partition: CheckinPartition, project_id: str) -> int:
    days = {parsed for parsed in map(parse_day_key, partition.keys_for(project_id)) if parsed}
    longest = 0
    for day in days:
        if day - timedelta(days=1) in days:
            continue
        length = 1
        while day + timedelta(days=length) in days:
            length += 1
        longest = max(longest, length)
    return longest


def stats(partition: CheckinPartition, project_id: str, today: DateLike) -> CheckinStats:
    return CheckinStats(
        total=total_count(partition, project_id),
        most_recent=most_recent(partition, project_id),
        streak=current_streak(partition, project_id, today),
    )


def day_cells(
    partition: CheckinPartition,
    project_id: str,
    weeks: Sequence[Sequence[date]],
    today: DateLike,
) -> List[List[DayCell]]:
    keys = partition.keys_for(project_id)
    grid: List[List[DayCell]] = []
    for week in weeks:
        row: List[DayCell] = []
        for day in week:
            key = day_key(day)
            checked = key in keys
            row.append(
                DayCell(
                    day=day,
                    key=key,
                    is_future=is_future(day, today),
                    is_checked=checked,
                    level=CHECKED_LEVEL if checked else EMPTY_LEVEL,
                )
            )
        grid.append(row)
    return grid


__all__ = [
    "current_streak",
    "day_cells",
    "is_checked",
    "longest_streak",
    "most_recent",
    "stats",
    "toggle",
    "total_count",
]
