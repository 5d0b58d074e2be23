from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.web import json_errors, login_required, request_data
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<int:class_id>", methods=["GET"], endpoint="attendance_sheet")
    @login_required
    @json_errors("tải dữ liệu điểm danh")
    def attendance_sheet(class_id: int):
        on = parse_optional_date(request.args.get("date"), default=now_local().date())
        rows = container.attendance_service.sheet(class_id, on)
        return jsonify(
            {
                "success": True,
                "class_id": class_id,
                "date": on.strftime("%Y-%m-%d"),
                "students": [r.to_dict() for r in rows],
            }
        )

    @app.route("/api/attendance/<int:class_id>", methods=["POST"], endpoint="attendance_save")
    @login_required
    @json_errors("lưu điểm danh")
    def attendance_save(class_id: int):
        data = request_data()
        on = parse_optional_date(data.get("date") or request.args.get("date"), default=now_local().date())

        marks = data.get("marks")
        if not isinstance(marks, dict):
            raise ValidationError("Dữ liệu điểm danh không hợp lệ")

        saved = container.attendance_service.save(class_id, on, marks)
        return jsonify({"success": True, "saved": saved, "message": "Đã lưu điểm danh."})
