from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_user_id, year_month_args
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timebank", methods=["GET"], endpoint="monthly_timebank")
    @api_view("Failed to calculate timebank")
    def monthly_timebank():
        user_id = current_user_id()
        year, month = year_month_args()

        summary = container.timebank_report_service.monthly_summary(user_id, year=year, month=month)
        return jsonify({"data": summary.as_dict()})
