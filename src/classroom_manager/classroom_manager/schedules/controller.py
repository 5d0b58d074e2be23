from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="calendar_week")
    @login_required
    @json_errors("tải lịch dạy")
    def calendar_week():
        today = now_local().date()
        reference = parse_optional_date(request.args.get("date"), default=today)
        week = container.schedule_service.calendar_week(reference, today=today)
        return jsonify({"success": True, **week.to_dict()})
