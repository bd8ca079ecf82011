"""Local calendar arithmetic for the check-in heatmap.

All helpers work on the *local* calendar fields of the value they receive:
``date`` objects are taken as-is and ``datetime`` objects (naive or aware) are
read through their own wall-clock fields. Nothing here converts to UTC.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Sequence, TypeVar, Union

DateLike = Union[date, datetime]
_D = TypeVar("_D", date, datetime)

DAYS_IN_WEEK = 7
DAY_KEY_FORMAT = "%Y-%m-%d"
# Sunday-first, matching weekday index 0 == Sunday.
WEEKDAY_NAMES = ["日", "一", "二", "三", "四", "五", "六"]


@dataclass(frozen=True)
class MonthLabel:
    """Label drawn above a heatmap week column."""

    month: int
    label: str


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def sunday_index(value: DateLike) -> int:
    """Weekday index where Sunday is 0 and Saturday is 6."""

    return (value.weekday() + 1) % DAYS_IN_WEEK


def day_key(value: DateLike) -> str:
    """Return the ``YYYY-MM-DD`` key of the local calendar day of ``value``."""

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_day_key(value: object) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` key back into a ``date``.

    Anything that is not a canonical key (wrong type, wrong padding, impossible
    date) yields ``None``.
    """

    if not isinstance(value, str) or len(value) != 10:
        return None
    try:
        parsed = datetime.strptime(value, DAY_KEY_FORMAT).date()
    except ValueError:
        return None
    if day_key(parsed) != value:
        return None
    return parsed


def start_of_day(value: DateLike) -> datetime:
    """Midnight of the same local calendar day. ``tzinfo`` is preserved."""

    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time.min)


def start_of_week(value: DateLike) -> datetime:
    """Midnight of the most recent Sunday, ``value`` itself included."""

    midnight = start_of_day(value)
    return midnight - timedelta(days=sunday_index(midnight))


def add_days(value: _D, days: int) -> _D:
    return value + timedelta(days=days)


def is_future(value: DateLike, today: DateLike) -> bool:
    """True when ``value`` falls on a calendar day strictly after ``today``."""

    return _as_date(value) > _as_date(today)


def build_week_grid(end_date: DateLike, total_days: int = 365) -> List[List[date]]:
    """Return Sunday-first weeks covering ``total_days`` days ending at ``end_date``.

    The first week is padded back to its Sunday and the last week is padded
    forward past ``end_date`` until it holds seven days. ``total_days`` below 1
    is treated as a one-day window.
    """

    window = max(int(total_days), 1)
    end = _as_date(end_date)
    start = add_days(end, -(window - 1))
    current = start - timedelta(days=sunday_index(start))

    weeks: List[List[date]] = []
    week: List[date] = []
    while current <= end:
        week.append(current)
        if len(week) == DAYS_IN_WEEK:
            weeks.append(week)
            week = []
        current = add_days(current, 1)

    if week:
        while len(week) < DAYS_IN_WEEK:
            week.append(current)
            current = add_days(current, 1)
        weeks.append(week)

    return weeks


def month_labels(weeks: Sequence[Sequence[DateLike]]) -> List[MonthLabel]:
    """One label per week; blank unless the week's first day starts a new month."""

    labels: List[MonthLabel] = []
    last_month: Optional[int] = None
    for week in weeks:
        month = week[0].month
        if month != last_month:
            labels.append(MonthLabel(month=month, label=f"{month}月"))
            last_month = month
        else:
            labels.append(MonthLabel(month=month, label=""))
    return labels


def weekday_labels() -> List[str]:
    """Row labels for the heatmap; only every other weekday is shown."""

    return [name if index % 2 else "" for index, name in enumerate(WEEKDAY_NAMES)]


__all__ = [
    "DAYS_IN_WEEK",
    "MonthLabel",
    "add_days",
    "build_week_grid",
    "day_key",
    "is_future",
    "month_labels",
    "parse_day_key",
    "start_of_day",
    "start_of_week",
    "sunday_index",
    "weekday_labels",
]
