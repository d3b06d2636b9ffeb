"""Timebank engine.

Pure functions converting a work schedule and recorded time entries into a
signed minute delta ("timebank"). No I/O and no state: every call is fully
determined by its arguments.

The engine is fail-soft. Incomplete days count as zero, a half-filled lunch
break counts as no lunch break, and a non-collection handed to the monthly
aggregate yields a zero result. Validation of submitted values happens in the
services (see ``TimeOfDay``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import time

from .model import DayTimes, TimebankResult, TimeValue

logger = logging.getLogger(__name__)


def time_to_minutes(value: TimeValue) -> int:
    """Minutes since midnight for "HH:MM" (or "HH:MM:SS"); 0 when absent.

    Hours and minutes are not range checked, "25:70" gives 1570.
    Non-numeric parts raise ValueError.
    """

    if not value:
        return 0
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = value.split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    return int(parts[0]) * 60 + int(parts[1])


def minutes_to_time(minutes: int) -> str:
    """Format a signed minute delta as "+HH:MM" / "-HH:MM".

    The hour field is unbounded: 1500 formats as "+25:00".
    """

    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(int(minutes)), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def work_minutes(day: DayTimes) -> int:
    """(exit - entry), minus the lunch span only when both lunch bounds are set."""
    minutes = time_to_minutes(day.exit_time) - time_to_minutes(day.entry_time)
    if day.lunch_start and day.lunch_end:
        minutes -= time_to_minutes(day.lunch_end) - time_to_minutes(day.lunch_start)
    return minutes


def calculate_daily_timebank(schedule: DayTimes, entry: DayTimes) -> TimebankResult:
    # Incomplete day: no delta.
    if not entry.entry_time or not entry.exit_time:
        return TimebankResult.zero()

    expected = work_minutes(schedule)
    actual = work_minutes(entry)

    minutes = int(round(actual - expected))
    return TimebankResult(minutes=minutes, formatted=minutes_to_time(minutes))


def calculate_monthly_timebank(entries: Iterable[DayTimes], schedule: DayTimes) -> TimebankResult:
    """Sum of the daily timebanks of ``entries`` against one schedule."""

    if entries is None or isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
        logger.warning("Entries is not a collection: %r", entries)
        return TimebankResult.zero()

    total = sum(calculate_daily_timebank(schedule, entry).minutes for entry in entries)
    return TimebankResult(minutes=total, formatted=minutes_to_time(total))
