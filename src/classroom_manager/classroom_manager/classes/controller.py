from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_errors, login_required, request_data
from ..container import Container
from ..core.exceptions import ValidationError
from ..schedules.codec import split_schedule


def _days(data: dict) -> list[str]:
    days = data.get("days")
    if days is None:
        days = request.form.getlist("days") if request.form else []
    if isinstance(days, str):
        days = [d for d in days.replace("/", ",").split(",")]
    return [str(d).strip() for d in days if str(d).strip()]


def _dob(data: dict):
    value = (data.get("date_of_birth") or "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Ngày sinh không hợp lệ (YYYY-MM-DD)")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    @login_required
    @json_errors("tải danh sách lớp")
    def classes_list():
        classes = container.class_service.list_classes()
        return jsonify({"success": True, "classes": [c.to_dict() for c in classes]})

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    @login_required
    @json_errors("tạo lớp")
    def classes_create():
        data = request_data()
        class_id = container.class_service.create_class(
            name=data.get("name", ""),
            schedule=data.get("schedule"),
            days=_days(data),
            time=data.get("time"),
            level=data.get("level"),
            owner_id=session.get("profile_id"),
        )
        return jsonify({"success": True, "class_id": class_id, "message": "Đã tạo lớp."}), 201

    @app.route("/api/classes/<int:class_id>", methods=["GET"], endpoint="classes_detail")
    @login_required
    @json_errors("tải lớp")
    def classes_detail(class_id: int):
        cls = container.class_service.get(class_id)
        days, time = split_schedule(cls.schedule)
        return jsonify({"success": True, "class": cls.to_dict(), "picker": {"days": days, "time": time}})

    @app.route("/api/classes/<int:class_id>", methods=["PUT"], endpoint="classes_update")
    @login_required
    @json_errors("cập nhật lớp")
    def classes_update(class_id: int):
        data = request_data()
        container.class_service.update_class(
            class_id=class_id,
            name=data.get("name", ""),
            schedule=data.get("schedule"),
            days=_days(data),
            time=data.get("time"),
            level=data.get("level"),
        )
        return jsonify({"success": True, "message": "Đã cập nhật lớp."})

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="classes_delete")
    @login_required
    @json_errors("xóa lớp")
    def classes_delete(class_id: int):
        container.class_service.delete_class(class_id)
        return jsonify({"success": True, "message": "Đã xóa lớp."})

    @app.route("/api/classes/<int:class_id>/students", methods=["GET"], endpoint="students_list")
    @login_required
    @json_errors("tải danh sách học viên")
    def students_list(class_id: int):
        students = container.student_service.list_for_class(class_id)
        return jsonify({"success": True, "students": [s.to_dict() for s in students]})

    @app.route("/api/classes/<int:class_id>/students", methods=["POST"], endpoint="students_create")
    @login_required
    @json_errors("thêm học viên")
    def students_create(class_id: int):
        data = request_data()
        student_id = container.student_service.add_student(
            class_id=class_id,
            name=data.get("name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
            parent_name=data.get("parent_name"),
            date_of_birth=_dob(data),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "student_id": student_id, "message": "Đã thêm học viên."}), 201

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="students_update")
    @login_required
    @json_errors("cập nhật học viên")
    def students_update(student_id: int):
        data = request_data()
        container.student_service.update_student(
            student_id=student_id,
            name=data.get("name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
            parent_name=data.get("parent_name"),
            date_of_birth=_dob(data),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "message": "Đã cập nhật học viên."})

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    @login_required
    @json_errors("xóa học viên")
    def students_delete(student_id: int):
        container.student_service.remove_student(student_id)
        return jsonify({"success": True, "message": "Đã xóa học viên."})
