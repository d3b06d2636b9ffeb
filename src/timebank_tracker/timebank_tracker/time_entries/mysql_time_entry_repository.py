from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, mysql_time_to_hhmm
from .model import TimeEntry
from .repository import TimeEntryRepository

_COLUMNS = "entry_id, user_id, work_date, entry_time, lunch_start, lunch_end, exit_time"


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        entry_time=mysql_time_to_hhmm(r.get("entry_time")),
        lunch_start=mysql_time_to_hhmm(r.get("lunch_start")),
        lunch_end=mysql_time_to_hhmm(r.get("lunch_end")),
        exit_time=mysql_time_to_hhmm(r.get("exit_time")),
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(user_id, work_date, entry_time, lunch_start, lunch_end, exit_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    entry_time=VALUES(entry_time),
                    lunch_start=VALUES(lunch_start),
                    lunch_end=VALUES(lunch_end),
                    exit_time=VALUES(exit_time)
                """,
                (int(user_id), work_date, entry_time, lunch_start, lunch_end, exit_time),
            )

            # If it was an update, lastrowid can be 0; fetch the row back.
            cur.execute(
                f"SELECT {_COLUMNS} FROM time_entries WHERE user_id=%s AND work_date=%s",
                (int(user_id), work_date),
            )
            return _to_entry(cur.fetchone())

    def list_range(self, *, user_id: int, start: date, end: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(user_id), start, end),
            )
            return [_to_entry(r) for r in cur.fetchall()]
