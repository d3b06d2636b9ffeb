from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, timezone
from typing import Optional, Union

from ..core.exceptions import ValidationError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def normalize_work_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Coerce a submitted date into a calendar date.

    Accepts a ``date``, a ``datetime`` (its date part), a ``YYYY-MM-DD`` string
    or a full ISO datetime string such as ``2024-03-05T00:00:00.000Z``. Strings carrying a UTC
    offset are converted to UTC before the date is taken.
    Returns None when the value cannot be understood.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    value = value.strip()
    try:
        if _ISO_DATE_RE.match(value):
            return parse_iso_date(value)
        # fromisoformat does not accept a trailing 'Z' before Python 3.11
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    if not MINYEAR <= int(year) <= MAXYEAR or not 1 <= int(month) <= 12:
        raise ValidationError("Invalid year or month")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
