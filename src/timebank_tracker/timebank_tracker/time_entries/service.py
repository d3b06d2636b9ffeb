from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from ..common.datetime_utils import month_bounds, normalize_work_date
from ..common.validators import blank_to_none, require_present
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.repository import WorkScheduleRepository
from ..timebank.engine import calculate_daily_timebank
from ..timebank.model import TimebankResult
from ..timebank.time_of_day import TimeOfDay, TimeParseError
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmittedEntry:
    entry: TimeEntry
    timebank: TimebankResult

    def as_dict(self) -> dict:
        return {"entry": self.entry.as_dict(), "timebank": self.timebank.as_dict()}


def _canonical(value) -> Optional[str]:
    t = TimeOfDay.parse_optional(blank_to_none(value))
    return str(t) if t else None


class TimeEntryService:
    """Use case: record a day's times and read a month back."""

    def __init__(self, entries: TimeEntryRepository, schedules: WorkScheduleRepository):
        self._entries = entries
        self._schedules = schedules

    def submit(
        self,
        user_id: int,
        *,
        work_date: Union[str, date, None],
        entry_time: Optional[str],
        lunch_start: Optional[str] = None,
        lunch_end: Optional[str] = None,
        exit_time: Optional[str],
    ) -> SubmittedEntry:
        require_present("Missing required fields", work_date, entry_time, exit_time)

        day = normalize_work_date(work_date)
        if not day:
            raise ValidationError("Invalid date format")

        try:
            times = dict(
                entry_time=_canonical(entry_time),
                lunch_start=_canonical(lunch_start),
                lunch_end=_canonical(lunch_end),
                exit_time=_canonical(exit_time),
            )
        except TimeParseError:
            raise ValidationError("Invalid time format. Use HH:MM format")

        schedule = self._schedules.get_for_user(int(user_id))
        if not schedule:
            raise NotFoundError("Work schedule not found")

        entry = self._entries.upsert(user_id=int(user_id), work_date=day, **times)
        logger.debug("Stored time entry user=%s date=%s", user_id, day)

        return SubmittedEntry(entry=entry, timebank=calculate_daily_timebank(schedule, entry))

    def list_month(self, user_id: int, *, year: int, month: int) -> Sequence[TimeEntry]:
        start, end = month_bounds(year, month)
        entries = self._entries.list_range(user_id=int(user_id), start=start, end=end)
        return sorted(entries, key=lambda e: e.work_date)

    def filled_dates(self, user_id: int, *, year: int, month: int) -> list[date]:
        """Days of the month that already have an entry (calendar markers)."""
        return [e.work_date for e in self.list_month(user_id, year=year, month=month)]
