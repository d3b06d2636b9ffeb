from __future__ import annotations

from typing import Optional, Protocol

from .model import WorkSchedule


class WorkScheduleRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[WorkSchedule]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        user_id: int,
        entry_time: str,
        lunch_start: Optional[str],
        lunch_end: Optional[str],
        exit_time: str,
    ) -> WorkSchedule:
        """Create or replace the user's schedule (one per user)."""

        raise NotImplementedError
