from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_errors, login_required, request_data
from ..container import Container
from ..core.exceptions import ValidationError


def _words(data: dict) -> list:
    words = data.get("words")
    if not isinstance(words, list):
        raise ValidationError("Dữ liệu từ vựng không hợp lệ")
    return words


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/vocabulary", methods=["GET"], endpoint="vocabulary_list")
    @login_required
    @json_errors("tải từ vựng")
    def vocabulary_list(class_id: int):
        lists = container.vocabulary_service.list_for_class(class_id)
        return jsonify({"success": True, "vocabulary": [v.to_dict() for v in lists]})

    @app.route("/api/classes/<int:class_id>/vocabulary", methods=["POST"], endpoint="vocabulary_create")
    @login_required
    @json_errors("lưu bộ từ vựng")
    def vocabulary_create(class_id: int):
        data = request_data()
        list_id = container.vocabulary_service.create_list(
            class_id=class_id,
            week=data.get("week", ""),
            words=_words(data),
        )
        return jsonify({"success": True, "list_id": list_id, "message": "Đã lưu bộ từ vựng."}), 201

    @app.route("/api/vocabulary/<int:list_id>", methods=["PUT"], endpoint="vocabulary_update")
    @login_required
    @json_errors("cập nhật bộ từ vựng")
    def vocabulary_update(list_id: int):
        data = request_data()
        container.vocabulary_service.update_list(list_id=list_id, week=data.get("week", ""), words=_words(data))
        return jsonify({"success": True, "message": "Đã cập nhật bộ từ vựng."})

    @app.route("/api/vocabulary/<int:list_id>", methods=["DELETE"], endpoint="vocabulary_delete")
    @login_required
    @json_errors("xóa bộ từ vựng")
    def vocabulary_delete(list_id: int):
        container.vocabulary_service.delete_list(list_id)
        return jsonify({"success": True, "message": "Đã xóa bộ từ vựng."})
