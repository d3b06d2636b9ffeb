from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Protocol, Union

from ..core.constants import ZERO_TIMEBANK

TimeValue = Union[str, time, None]


class DayTimes(Protocol):
    """Anything carrying the four time-of-day fields of a working day.

    Both WorkSchedule and TimeEntry satisfy it.
    """

    entry_time: TimeValue
    lunch_start: TimeValue
    lunch_end: TimeValue
    exit_time: TimeValue


@dataclass(frozen=True)
class TimebankResult:
    """Signed minute delta plus its "+HH:MM" / "-HH:MM" rendering."""

    minutes: int
    formatted: str

    @classmethod
    def zero(cls) -> "TimebankResult":
        return cls(minutes=0, formatted=ZERO_TIMEBANK)

    @property
    def is_surplus(self) -> bool:
        return self.minutes >= 0

    @property
    def hours(self) -> int:
        return abs(self.minutes) // 60

    @property
    def remainder_minutes(self) -> int:
        return abs(self.minutes) % 60

    def as_dict(self) -> dict:
        return {
            "minutes": self.minutes,
            "formatted": self.formatted,
            "hours": self.hours,
            "remainderMinutes": self.remainder_minutes,
            "isSurplus": self.is_surplus,
        }
