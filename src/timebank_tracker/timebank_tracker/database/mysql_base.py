from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Optional

from .connection import DatabaseConnection

_MINUTES_PER_DAY = 24 * 60


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit when the block succeeds, roll back when it raises."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def mysql_time_to_hhmm(value: Any) -> Optional[str]:
    """TIME column -> "HH:MM" (None stays None).

    mysql-connector hands TIME back as ``timedelta``; other drivers and
    hand-written rows use ``time`` or an ``"HH:MM[:SS]"`` string.
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) // 60 % _MINUTES_PER_DAY
        return "%02d:%02d" % divmod(minutes, 60)
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, str):
        hours, minutes = value.strip().split(":")[:2]
        return f"{int(hours):02d}:{int(minutes):02d}"
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
