from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_bounds
from ..core.exceptions import NotFoundError
from ..schedules.repository import WorkScheduleRepository
from ..time_entries.repository import TimeEntryRepository
from ..timebank.engine import calculate_daily_timebank, calculate_monthly_timebank
from ..timebank.model import TimebankResult


@dataclass(frozen=True)
class DailyTimebankRow:
    work_date: date
    entry_time: Optional[str]
    lunch_start: Optional[str]
    lunch_end: Optional[str]
    exit_time: Optional[str]
    timebank: TimebankResult

    def as_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "entry_time": self.entry_time,
            "lunch_start": self.lunch_start,
            "lunch_end": self.lunch_end,
            "exit_time": self.exit_time,
            "timebank": self.timebank.as_dict(),
        }


@dataclass(frozen=True)
class MonthlySummary:
    year: int
    month: int
    timebank: TimebankResult
    days: list[DailyTimebankRow] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "timebank": self.timebank.as_dict(),
            "days": [d.as_dict() for d in self.days],
        }


class TimebankReportService:
    """Dashboard read-model: a user's month against their work schedule."""

    def __init__(self, entries: TimeEntryRepository, schedules: WorkScheduleRepository):
        self._entries = entries
        self._schedules = schedules

    def monthly_summary(self, user_id: int, *, year: int, month: int) -> MonthlySummary:
        schedule = self._schedules.get_for_user(int(user_id))
        if not schedule:
            raise NotFoundError("Work schedule not found")

        start, end = month_bounds(year, month)
        entries = sorted(
            self._entries.list_range(user_id=int(user_id), start=start, end=end),
            key=lambda e: e.work_date,
        )

        days = [
            DailyTimebankRow(
                work_date=e.work_date,
                entry_time=e.entry_time,
                lunch_start=e.lunch_start,
                lunch_end=e.lunch_end,
                exit_time=e.exit_time,
                timebank=calculate_daily_timebank(schedule, e),
            )
            for e in entries
        ]

        return MonthlySummary(
            year=int(year),
            month=int(month),
            timebank=calculate_monthly_timebank(entries, schedule),
            days=days,
        )
