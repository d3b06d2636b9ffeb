from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def upsert(
        self,
        *,
        user_id: int,
        work_date: date,
        entry_time: Optional[str],
        lunch_start: Optional[str],
        lunch_end: Optional[str],
        exit_time: Optional[str],
    ) -> TimeEntry:
        """Create or overwrite the entry for (user_id, work_date)."""

        raise NotImplementedError

    def list_range(self, *, user_id: int, start: date, end: date) -> Sequence[TimeEntry]:
        """Entries with start <= work_date <= end, oldest first."""

        raise NotImplementedError
