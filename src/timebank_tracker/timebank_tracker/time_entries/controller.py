from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_user_id, json_body, year_month_args
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-entries", methods=["POST"], endpoint="submit_time_entry")
    @api_view("Failed to create time entry")
    def submit_time_entry():
        user_id = current_user_id()
        body = json_body()

        submitted = container.time_entry_service.submit(
            user_id,
            work_date=body.get("date"),
            entry_time=body.get("entry_time"),
            lunch_start=body.get("lunch_start"),
            lunch_end=body.get("lunch_end"),
            exit_time=body.get("exit_time"),
        )
        return jsonify({"data": submitted.as_dict()})

    @app.route("/api/time-entries", methods=["GET"], endpoint="list_time_entries")
    @api_view("Failed to fetch time entries")
    def list_time_entries():
        user_id = current_user_id()
        year, month = year_month_args()

        entries = container.time_entry_service.list_month(user_id, year=year, month=month)
        return jsonify({"data": [e.as_dict() for e in entries]})

    @app.route("/api/time-entries/filled-dates", methods=["GET"], endpoint="filled_dates")
    @api_view("Failed to fetch time entries")
    def filled_dates():
        user_id = current_user_id()
        year, month = year_month_args()

        days = container.time_entry_service.filled_dates(user_id, year=year, month=month)
        return jsonify({"data": [d.strftime("%Y-%m-%d") for d in days]})
