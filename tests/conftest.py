from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.timebank_tracker.timebank_tracker.container import wire_container
from src.timebank_tracker.timebank_tracker.main import create_app
from src.timebank_tracker.timebank_tracker.schedules.model import WorkSchedule
from src.timebank_tracker.timebank_tracker.time_entries.model import TimeEntry


@dataclass
class InMemorySchedules:
    by_user: dict[int, WorkSchedule] = field(default_factory=dict)

    def get_for_user(self, user_id: int) -> Optional[WorkSchedule]:
        return self.by_user.get(user_id)

    def upsert(self, *, user_id: int, entry_time, lunch_start, lunch_end, exit_time) -> WorkSchedule:
        sc = WorkSchedule(
            user_id=user_id,
            entry_time=entry_time,
            lunch_start=lunch_start,
            lunch_end=lunch_end,
            exit_time=exit_time,
        )
        self.by_user[user_id] = sc
        return sc


class InMemoryEntries:
    def __init__(self):
        self._by_user_date: dict[tuple[int, date], TimeEntry] = {}
        self._id = 0

    def upsert(self, *, user_id: int, work_date: date, entry_time, lunch_start, lunch_end, exit_time) -> TimeEntry:
        existing = self._by_user_date.get((user_id, work_date))
        if existing:
            rec = replace(
                existing,
                entry_time=entry_time,
                lunch_start=lunch_start,
                lunch_end=lunch_end,
                exit_time=exit_time,
            )
        else:
            self._id += 1
            rec = TimeEntry(
                entry_id=self._id,
                user_id=user_id,
                work_date=work_date,
                entry_time=entry_time,
                lunch_start=lunch_start,
                lunch_end=lunch_end,
                exit_time=exit_time,
            )
        self._by_user_date[(user_id, work_date)] = rec
        return rec

    def list_range(self, *, user_id: int, start: date, end: date):
        # Newest first on purpose: services must sort.
        items = [r for r in self._by_user_date.values() if r.user_id == user_id and start <= r.work_date <= end]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 8, 25, 0)


@pytest.fixture
def default_schedule() -> WorkSchedule:
    return WorkSchedule(user_id=1, entry_time="09:00", lunch_start="12:00", lunch_end="13:00", exit_time="18:00")


@pytest.fixture
def schedules_repo(default_schedule) -> InMemorySchedules:
    return InMemorySchedules({1: default_schedule})


@pytest.fixture
def entries_repo() -> InMemoryEntries:
    return InMemoryEntries()


@pytest.fixture
def container(schedules_repo, entries_repo):
    return wire_container(schedules_repo, entries_repo)


@pytest.fixture
def app(container):
    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
    return client
