from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_user_id, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/work-schedule", methods=["GET"], endpoint="get_work_schedule")
    @api_view("Failed to fetch work schedule")
    def get_work_schedule():
        schedule = container.work_schedule_service.get(current_user_id())
        return jsonify({"data": schedule.as_dict()})

    @app.route("/api/work-schedule", methods=["POST"], endpoint="update_work_schedule")
    @api_view("Failed to update work schedule")
    def update_work_schedule():
        user_id = current_user_id()
        body = json_body()

        schedule = container.work_schedule_service.update(
            user_id,
            entry_time=body.get("entryTime"),
            lunch_start=body.get("lunchStart"),
            lunch_end=body.get("lunchEnd"),
            exit_time=body.get("exitTime"),
        )
        return jsonify({"data": schedule.as_dict()})
