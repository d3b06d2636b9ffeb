from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, mysql_time_to_hhmm
from .model import WorkSchedule
from .repository import WorkScheduleRepository


class MySQLWorkScheduleRepository(WorkScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, entry_time, lunch_start, lunch_end, exit_time
                FROM work_schedules
                WHERE user_id=%s
                """,
                (int(user_id),),
            )
            r = cur.fetchone()
            if not r:
                return None
            return WorkSchedule(
                user_id=int(r["user_id"]),
                entry_time=mysql_time_to_hhmm(r["entry_time"]),
                lunch_start=mysql_time_to_hhmm(r.get("lunch_start")),
                lunch_end=mysql_time_to_hhmm(r.get("lunch_end")),
                exit_time=mysql_time_to_hhmm(r["exit_time"]),
            )

    def upsert(
        self,
        *,
        user_id: int,
        entry_time: str,
        lunch_start: Optional[str],
        lunch_end: Optional[str],
        exit_time: str,
    ) -> WorkSchedule:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_schedules(user_id, entry_time, lunch_start, lunch_end, exit_time)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    entry_time=VALUES(entry_time),
                    lunch_start=VALUES(lunch_start),
                    lunch_end=VALUES(lunch_end),
                    exit_time=VALUES(exit_time)
                """,
                (int(user_id), entry_time, lunch_start, lunch_end, exit_time),
            )

        return WorkSchedule(
            user_id=int(user_id),
            entry_time=entry_time,
            lunch_start=lunch_start,
            lunch_end=lunch_end,
            exit_time=exit_time,
        )
