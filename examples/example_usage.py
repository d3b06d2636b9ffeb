"""Example: use the service layer without Flask.

Records a couple of days for user 1 and prints the month's timebank.
"""

import importlib

from config import get_settings_module

from src.timebank_tracker.timebank_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    container.work_schedule_service.ensure_default(1)
    container.time_entry_service.submit(1, work_date="2026-01-05", entry_time="09:00", lunch_start="12:00", lunch_end="13:00", exit_time="18:30")
    container.time_entry_service.submit(1, work_date="2026-01-06", entry_time="09:15", exit_time="17:00")

    summary = container.timebank_report_service.monthly_summary(1, year=2026, month=1)
    for day in summary.days:
        print(day.work_date, day.timebank.formatted)
    print("Total:", summary.timebank.formatted)


if __name__ == "__main__":
    main()
