from datetime import date, datetime, timedelta, timezone
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from helpers.datetime_utils import (
    MonthLabel,
    add_days,
    build_week_grid,
    day_key,
    is_future,
    month_labels,
    parse_day_key,
    start_of_day,
    start_of_week,
    weekday_labels,
)


def test_day_key_pads_and_ignores_time_of_day():
    assert day_key(date(2024, 6, 10)) == "2024-06-10"
    assert day_key(datetime(2024, 6, 10, 0, 0)) == "2024-06-10"
    assert day_key(datetime(2024, 6, 10, 23, 59, 59)) == "2024-06-10"
    assert day_key(date(987, 1, 2)) == "0987-01-02"


def test_day_key_uses_local_fields_of_aware_datetimes():
    late_evening = datetime(2024, 6, 10, 23, 30, tzinfo=timezone(timedelta(hours=-7)))
    assert day_key(late_evening) == "2024-06-10"


def test_day_key_order_matches_calendar_order():
    day = date(2023, 11, 1)
    previous = day_key(day)
    for _ in range(800):
        day = add_days(day, 1)
        current = day_key(day)
        assert current > previous
        assert day_key(day) == current
        previous = current


def test_parse_day_key_round_trip_and_rejects():
    assert parse_day_key("2024-02-29") == date(2024, 2, 29)
    assert parse_day_key("2023-02-29") is None
    assert parse_day_key("2024-6-1") is None
    assert parse_day_key("2024-06-10T00:00") is None
    assert parse_day_key(20240610) is None
    assert parse_day_key(None) is None


def test_start_of_day_and_week():
    assert start_of_day(datetime(2024, 6, 10, 15, 30, 12)) == datetime(2024, 6, 10)
    assert start_of_day(date(2024, 6, 10)) == datetime(2024, 6, 10)
    # 2024-06-09 is a Sunday
    assert start_of_week(datetime(2024, 6, 10, 15, 30)) == datetime(2024, 6, 9)
    assert start_of_week(date(2024, 6, 9)) == datetime(2024, 6, 9)
    assert start_of_week(date(2024, 6, 15)) == datetime(2024, 6, 9)
    assert start_of_week(date(2024, 1, 2)) == datetime(2023, 12, 31)


def test_add_days_rolls_over_months_and_years():
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert add_days(date(2024, 3, 1), -1) == date(2024, 2, 29)
    assert add_days(date(2024, 12, 31), 1) == date(2025, 1, 1)
    assert add_days(datetime(2025, 1, 1, 8), -1) == datetime(2024, 12, 31, 8)


def test_week_grid_for_a_year():
    today = date(2024, 6, 10)
    weeks = build_week_grid(today, 365)

    assert len(weeks) == 53
    assert weeks[0][0] == date(2023, 6, 11)
    assert weeks[-1][0] == date(2024, 6, 9)
    assert weeks[-1][1] == today
    assert weeks[-1][-1] == date(2024, 6, 15)
    assert all(len(week) == 7 for week in weeks)


def test_week_grid_shape_for_every_end_date():
    end = date(2024, 1, 1)
    for offset in range(400):
        today = end + timedelta(days=offset)
        weeks = build_week_grid(today, 365)
        flat = [day for week in weeks for day in week]

        assert all(len(week) == 7 for week in weeks)
        assert today in weeks[-1]
        assert flat[0].weekday() == 6  # Sunday
        assert all(b - a == timedelta(days=1) for a, b in zip(flat, flat[1:]))
        assert all(day <= today for week in weeks[:-1] for day in week)
        assert flat.index(today) >= 364


def test_week_grid_is_rebuilt_identically():
    assert build_week_grid(date(2024, 6, 10), 90) == build_week_grid(date(2024, 6, 10), 90)


def test_week_grid_clamps_non_positive_windows():
    one_day = build_week_grid(date(2024, 6, 10), 1)
    assert one_day == [[date(2024, 6, 9) + timedelta(days=i) for i in range(7)]]
    assert build_week_grid(date(2024, 6, 10), 0) == one_day
    assert build_week_grid(date(2024, 6, 10), -5) == one_day


def test_week_grid_without_padding_on_saturday():
    weeks = build_week_grid(date(2024, 6, 15), 7)
    assert weeks == [[date(2024, 6, 9) + timedelta(days=i) for i in range(7)]]


def test_month_labels_mark_month_changes():
    weeks = build_week_grid(date(2024, 3, 9), 28)
    labels = month_labels(weeks)

    assert [week[0] for week in weeks] == [
        date(2024, 2, 11),
        date(2024, 2, 18),
        date(2024, 2, 25),
        date(2024, 3, 3),
    ]
    assert labels == [
        MonthLabel(2, "2月"),
        MonthLabel(2, ""),
        MonthLabel(2, ""),
        MonthLabel(3, "3月"),
    ]


def test_month_labels_one_per_week_and_first_always_labelled():
    weeks = build_week_grid(date(2024, 6, 10), 365)
    labels = month_labels(weeks)
    assert len(labels) == len(weeks)
    assert labels[0].label == "6月"
    assert sum(1 for label in labels if label.label) == 13


def test_is_future_compares_calendar_days():
    today = datetime(2024, 6, 10, 9, 0)
    assert not is_future(date(2024, 6, 10), today)
    assert not is_future(datetime(2024, 6, 10, 23, 0), today)
    assert is_future(date(2024, 6, 11), today)


def test_weekday_labels_show_every_other_row():
    assert weekday_labels() == ["", "一", "", "三", "", "五", ""]
