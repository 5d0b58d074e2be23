from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_errors, login_required, request_data
from ..container import Container
from ..core.exceptions import ValidationError


def _due_date(data: dict):
    value = (data.get("due_date") or "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Hạn nộp không hợp lệ (YYYY-MM-DD)")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/assignments", methods=["GET"], endpoint="assignments_list")
    @login_required
    @json_errors("tải bài tập")
    def assignments_list(class_id: int):
        items = container.assignment_service.list_for_class(class_id)
        return jsonify({"success": True, "assignments": [a.to_dict() for a in items]})

    @app.route("/api/classes/<int:class_id>/assignments", methods=["POST"], endpoint="assignments_create")
    @login_required
    @json_errors("giao bài tập")
    def assignments_create(class_id: int):
        data = request_data()
        assignment_id = container.assignment_service.create_assignment(
            class_id=class_id,
            title=data.get("title", ""),
            description=data.get("description"),
            due_date=_due_date(data),
        )
        return jsonify({"success": True, "assignment_id": assignment_id, "message": "Đã giao bài tập."}), 201

    @app.route("/api/assignments/<int:assignment_id>", methods=["PUT"], endpoint="assignments_update")
    @login_required
    @json_errors("cập nhật bài tập")
    def assignments_update(assignment_id: int):
        data = request_data()
        container.assignment_service.update_assignment(
            assignment_id=assignment_id,
            title=data.get("title", ""),
            description=data.get("description"),
            due_date=_due_date(data),
        )
        return jsonify({"success": True, "message": "Đã cập nhật bài tập."})

    @app.route("/api/assignments/<int:assignment_id>", methods=["DELETE"], endpoint="assignments_delete")
    @login_required
    @json_errors("xóa bài tập")
    def assignments_delete(assignment_id: int):
        container.assignment_service.delete_assignment(assignment_id)
        return jsonify({"success": True, "message": "Đã xóa bài tập."})
