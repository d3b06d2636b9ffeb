from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorkSchedule:
    """Expected daily timing for a user ("HH:MM" strings)."""

    user_id: int
    entry_time: str
    exit_time: str
    lunch_start: Optional[str] = None
    lunch_end: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "entryTime": self.entry_time,
            "lunchStart": self.lunch_start,
            "lunchEnd": self.lunch_end,
            "exitTime": self.exit_time,
        }
