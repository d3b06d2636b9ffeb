from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import blank_to_none, require_present
from ..core.constants import DEFAULT_ENTRY_TIME, DEFAULT_EXIT_TIME, DEFAULT_LUNCH_END, DEFAULT_LUNCH_START
from ..core.exceptions import NotFoundError, ValidationError
from ..timebank.time_of_day import TimeOfDay, TimeParseError
from .model import WorkSchedule
from .repository import WorkScheduleRepository

logger = logging.getLogger(__name__)


class WorkScheduleService:
    """Use case: read and configure a user's expected daily schedule."""

    def __init__(self, schedules: WorkScheduleRepository):
        self._schedules = schedules

    def get(self, user_id: int) -> WorkSchedule:
        schedule = self._schedules.get_for_user(int(user_id))
        if not schedule:
            raise NotFoundError("Work schedule not found")
        return schedule

    def ensure_default(self, user_id: int) -> WorkSchedule:
        """Return the user's schedule, creating the default one on first use."""

        schedule = self._schedules.get_for_user(int(user_id))
        if schedule:
            return schedule

        logger.info("Creating default work schedule for user %s", user_id)
        return self._schedules.upsert(
            user_id=int(user_id),
            entry_time=DEFAULT_ENTRY_TIME,
            lunch_start=DEFAULT_LUNCH_START,
            lunch_end=DEFAULT_LUNCH_END,
            exit_time=DEFAULT_EXIT_TIME,
        )

    def update(
        self,
        user_id: int,
        *,
        entry_time: Optional[str],
        lunch_start: Optional[str] = None,
        lunch_end: Optional[str] = None,
        exit_time: Optional[str],
    ) -> WorkSchedule:
        require_present("Missing required fields", entry_time, exit_time)

        try:
            entry = TimeOfDay.parse(entry_time)
            exit_ = TimeOfDay.parse(exit_time)
            l_start = TimeOfDay.parse_optional(blank_to_none(lunch_start))
            l_end = TimeOfDay.parse_optional(blank_to_none(lunch_end))
        except TimeParseError:
            raise ValidationError("Invalid time format. Use HH:MM format")

        if l_start and l_end:
            chain = [
                ("Entry Time", entry),
                ("Lunch Start", l_start),
                ("Lunch End", l_end),
                ("Exit Time", exit_),
            ]
            for (name_a, a), (name_b, b) in zip(chain, chain[1:]):
                if a >= b:
                    raise ValidationError(f"{name_a} must be before {name_b}")
        elif entry >= exit_:
            raise ValidationError("Entry time must be before exit time")

        return self._schedules.upsert(
            user_id=int(user_id),
            entry_time=str(entry),
            lunch_start=str(l_start) if l_start else None,
            lunch_end=str(l_end) if l_end else None,
            exit_time=str(exit_),
        )
