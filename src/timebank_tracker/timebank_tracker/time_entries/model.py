from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class TimeEntry:
    """Actual timing recorded for one calendar day."""

    user_id: int
    work_date: date
    entry_time: Optional[str] = None
    lunch_start: Optional[str] = None
    lunch_end: Optional[str] = None
    exit_time: Optional[str] = None
    entry_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "entry_time": self.entry_time,
            "lunch_start": self.lunch_start,
            "lunch_end": self.lunch_end,
            "exit_time": self.exit_time,
        }
