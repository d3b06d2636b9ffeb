from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])(?::([0-5][0-9]))?$")


class TimeParseError(ValidationError):
    """Raised when a value is not a valid 24-hour HH:MM time of day."""


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Validated time of day (hours 0-23, minutes 0-59).

    Services parse submitted values through this type before anything is
    stored, so the engine only ever sees well-formed times coming from the
    application's own storage.
    """

    hour: int
    minute: int

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise TimeParseError(f"Invalid time of day: {self.hour:02d}:{self.minute:02d}")

    @classmethod
    def parse(cls, value) -> "TimeOfDay":
        if isinstance(value, time):
            return cls(value.hour, value.minute)
        if not isinstance(value, str):
            raise TimeParseError(f"Invalid time value: {value!r}")

        m = _TIME_RE.match(value.strip())
        if not m:
            raise TimeParseError(f"Invalid time value: {value!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @classmethod
    def parse_optional(cls, value) -> Optional["TimeOfDay"]:
        if value is None or value == "":
            return None
        return cls.parse(value)

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
