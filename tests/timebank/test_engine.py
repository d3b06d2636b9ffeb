from __future__ import annotations

from datetime import date, time

import pytest

from src.timebank_tracker.timebank_tracker.schedules.model import WorkSchedule
from src.timebank_tracker.timebank_tracker.time_entries.model import TimeEntry
from src.timebank_tracker.timebank_tracker.timebank.engine import (
    calculate_daily_timebank,
    calculate_monthly_timebank,
    minutes_to_time,
    time_to_minutes,
)
from src.timebank_tracker.timebank_tracker.timebank.model import TimebankResult


def _entry(entry_time=None, exit_time=None, lunch_start=None, lunch_end=None, day=1) -> TimeEntry:
    return TimeEntry(
        user_id=1,
        work_date=date(2026, 1, day),
        entry_time=entry_time,
        lunch_start=lunch_start,
        lunch_end=lunch_end,
        exit_time=exit_time,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        ("", 0),
        ("09:30", 570),
        ("00:00", 0),
        ("23:59", 1439),
        ("08:30:00", 510),
        ("25:70", 1570),
        (time(7, 15), 435),
    ],
)
def test_time_to_minutes(value, expected):
    assert time_to_minutes(value) == expected


@pytest.mark.parametrize("value", ["abc", "9", "ab:cd"])
def test_time_to_minutes_non_numeric_raises_value_error(value):
    with pytest.raises(ValueError):
        time_to_minutes(value)


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "+00:00"),
        (-45, "-00:45"),
        (90, "+01:30"),
        (-90, "-01:30"),
        (1500, "+25:00"),
        (-6000, "-100:00"),
    ],
)
def test_minutes_to_time(minutes, expected):
    assert minutes_to_time(minutes) == expected


def test_identical_entry_yields_zero(default_schedule):
    entry = _entry("09:00", "18:00", "12:00", "13:00")

    assert calculate_daily_timebank(default_schedule, entry) == TimebankResult(0, "+00:00")


def test_one_extra_hour(default_schedule):
    entry = _entry("09:00", "19:00", "12:00", "13:00")

    assert calculate_daily_timebank(default_schedule, entry) == TimebankResult(60, "+01:00")


@pytest.mark.parametrize(
    "entry",
    [
        _entry("09:00", None, "12:00", "13:00"),
        _entry(None, "19:00", "12:00", "13:00"),
        _entry("", "19:00"),
        _entry(),
    ],
)
def test_incomplete_entry_counts_as_zero(default_schedule, entry):
    assert calculate_daily_timebank(default_schedule, entry) == TimebankResult.zero()


def test_entry_without_lunch_against_schedule_with_lunch(default_schedule):
    # expected: (18:00-09:00) - (13:00-12:00) = 480, actual: 17:00-09:00 = 480
    entry = _entry("09:00", "17:00")

    assert calculate_daily_timebank(default_schedule, entry) == TimebankResult(0, "+00:00")


def test_half_filled_lunch_on_entry_is_ignored(default_schedule):
    entry = _entry("09:00", "18:00", lunch_start="12:00")

    assert calculate_daily_timebank(default_schedule, entry).minutes == 60


def test_half_filled_lunch_on_schedule_is_ignored():
    schedule = WorkSchedule(user_id=1, entry_time="09:00", lunch_start="12:00", lunch_end=None, exit_time="18:00")
    entry = _entry("09:00", "18:00", "12:00", "13:00")

    result = calculate_daily_timebank(schedule, entry)

    assert result == TimebankResult(-60, "-01:00")


def test_exit_before_entry_gives_large_deficit_without_raising(default_schedule):
    entry = _entry("18:00", "09:00")

    result = calculate_daily_timebank(default_schedule, entry)

    assert result.minutes == -540 - 480
    assert result.formatted == "-17:00"


def test_accepts_time_objects(default_schedule):
    entry = TimeEntry(
        user_id=1,
        work_date=date(2026, 1, 1),
        entry_time=time(8, 30),
        lunch_start=time(12, 0),
        lunch_end=time(12, 30),
        exit_time=time(17, 30),
    )

    assert calculate_daily_timebank(default_schedule, entry).minutes == 30


def test_monthly_sums_daily_results(default_schedule):
    entries = [
        _entry("09:00", "19:00", "12:00", "13:00", day=2),  # +60
        _entry("09:00", "18:30", "12:00", "13:00", day=3),  # +30
        _entry("09:45", "18:00", "12:00", "13:00", day=4),  # -45
        _entry("09:00", None, day=5),  # incomplete
    ]

    result = calculate_monthly_timebank(entries, default_schedule)

    assert result == TimebankResult(45, "+00:45")
    assert result.minutes == sum(calculate_daily_timebank(default_schedule, e).minutes for e in entries)


def test_monthly_accepts_any_iterable(default_schedule):
    entries = (_entry("09:00", "19:00", "12:00", "13:00", day=d) for d in range(1, 4))

    assert calculate_monthly_timebank(entries, default_schedule) == TimebankResult(180, "+03:00")


def test_monthly_of_no_entries_is_zero(default_schedule):
    assert calculate_monthly_timebank([], default_schedule) == TimebankResult(0, "+00:00")


@pytest.mark.parametrize("bad", [None, "2026-01-01", {"date": "2026-01-01"}, 42])
def test_monthly_with_non_collection_is_zero(default_schedule, bad, caplog):
    result = calculate_monthly_timebank(bad, default_schedule)

    assert result == TimebankResult.zero()
    assert "not a collection" in caplog.text


def test_result_display_helpers():
    result = TimebankResult(-135, "-02:15")

    assert result.is_surplus is False
    assert result.hours == 2
    assert result.remainder_minutes == 15
    assert result.as_dict() == {
        "minutes": -135,
        "formatted": "-02:15",
        "hours": 2,
        "remainderMinutes": 15,
        "isSurplus": False,
    }
