from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .reports.service import TimebankReportService
from .schedules.mysql_work_schedule_repository import MySQLWorkScheduleRepository
from .schedules.repository import WorkScheduleRepository
from .schedules.service import WorkScheduleService
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeEntryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    work_schedules_repo: WorkScheduleRepository
    time_entries_repo: TimeEntryRepository

    work_schedule_service: WorkScheduleService
    time_entry_service: TimeEntryService
    timebank_report_service: TimebankReportService


def wire_container(
    work_schedules_repo: WorkScheduleRepository,
    time_entries_repo: TimeEntryRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        work_schedules_repo=work_schedules_repo,
        time_entries_repo=time_entries_repo,
        work_schedule_service=WorkScheduleService(work_schedules_repo),
        time_entry_service=TimeEntryService(time_entries_repo, work_schedules_repo),
        timebank_report_service=TimebankReportService(time_entries_repo, work_schedules_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        MySQLWorkScheduleRepository(conn),
        MySQLTimeEntryRepository(conn),
        conn=conn,
    )
