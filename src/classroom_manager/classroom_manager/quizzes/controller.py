from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_errors, login_required, request_data
from ..container import Container


def _question_fields(data: dict) -> dict:
    return {
        "question_text": data.get("question_text"),
        "question_type": data.get("question_type") or "multiple_choice",
        "options": data.get("options"),
        "correct_answer": data.get("correct_answer"),
        "points": data.get("points", 1),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/quizzes", methods=["GET"], endpoint="quizzes_list")
    @login_required
    @json_errors("tải bài kiểm tra")
    def quizzes_list(class_id: int):
        published_only = request.args.get("published") in {"1", "true"}
        quizzes = container.quiz_service.list_for_class(class_id, published_only=published_only)
        return jsonify({"success": True, "quizzes": [q.to_dict() for q in quizzes]})

    @app.route("/api/classes/<int:class_id>/quizzes", methods=["POST"], endpoint="quizzes_create")
    @login_required
    @json_errors("tạo bài kiểm tra")
    def quizzes_create(class_id: int):
        data = request_data()
        quiz_id = container.quiz_service.create_quiz(
            class_id=class_id,
            title=data.get("title", ""),
            description=data.get("description"),
            time_limit_minutes=data.get("time_limit_minutes", 15),
        )
        return jsonify({"success": True, "quiz_id": quiz_id, "message": "Đã tạo bài kiểm tra."}), 201

    @app.route("/api/quizzes/<int:quiz_id>", methods=["GET"], endpoint="quizzes_detail")
    @login_required
    @json_errors("tải bài kiểm tra")
    def quizzes_detail(quiz_id: int):
        # Answer keys are hidden when the quiz is opened for taking.
        include_answer = request.args.get("mode") != "attempt"
        svc = container.quiz_service
        return jsonify(
            {
                "success": True,
                "quiz": svc.get(quiz_id).to_dict(),
                "questions": [q.to_dict(include_answer=include_answer) for q in svc.questions(quiz_id)],
            }
        )

    @app.route("/api/quizzes/<int:quiz_id>", methods=["PUT"], endpoint="quizzes_update")
    @login_required
    @json_errors("cập nhật bài kiểm tra")
    def quizzes_update(quiz_id: int):
        data = request_data()
        container.quiz_service.update_quiz(
            quiz_id=quiz_id,
            title=data.get("title", ""),
            description=data.get("description"),
            time_limit_minutes=data.get("time_limit_minutes"),
        )
        return jsonify({"success": True, "message": "Đã cập nhật bài kiểm tra."})

    @app.route("/api/quizzes/<int:quiz_id>", methods=["DELETE"], endpoint="quizzes_delete")
    @login_required
    @json_errors("xóa bài kiểm tra")
    def quizzes_delete(quiz_id: int):
        container.quiz_service.delete_quiz(quiz_id)
        return jsonify({"success": True, "message": "Đã xóa bài kiểm tra."})

    @app.route("/api/quizzes/<int:quiz_id>/publish", methods=["POST"], endpoint="quizzes_publish")
    @login_required
    @json_errors("thay đổi trạng thái")
    def quizzes_publish(quiz_id: int):
        published = container.quiz_service.toggle_publish(quiz_id)
        return jsonify({"success": True, "is_published": published})

    @app.route("/api/quizzes/<int:quiz_id>/questions", methods=["POST"], endpoint="questions_create")
    @login_required
    @json_errors("thêm câu hỏi")
    def questions_create(quiz_id: int):
        data = request_data()
        question_id = container.quiz_service.add_question(quiz_id=quiz_id, **_question_fields(data))
        return jsonify({"success": True, "question_id": question_id, "message": "Đã thêm câu hỏi."}), 201

    @app.route("/api/questions/<int:question_id>", methods=["PUT"], endpoint="questions_update")
    @login_required
    @json_errors("cập nhật câu hỏi")
    def questions_update(question_id: int):
        data = request_data()
        fields = _question_fields(data)
        fields["question_text"] = fields["question_text"] or ""
        container.quiz_service.update_question(question_id=question_id, **fields)
        return jsonify({"success": True, "message": "Đã cập nhật câu hỏi."})

    @app.route("/api/questions/<int:question_id>", methods=["DELETE"], endpoint="questions_delete")
    @login_required
    @json_errors("xóa câu hỏi")
    def questions_delete(question_id: int):
        container.quiz_service.delete_question(question_id)
        return jsonify({"success": True, "message": "Đã xóa câu hỏi."})

    @app.route("/api/quizzes/<int:quiz_id>/attempts", methods=["POST"], endpoint="quizzes_attempt")
    @login_required
    @json_errors("nộp bài")
    def quizzes_attempt(quiz_id: int):
        data = request_data()
        attempt = container.quiz_service.submit_attempt(
            quiz_id=quiz_id,
            student_id=data.get("student_id") or 0,
            answers=data.get("answers") or {},
        )
        return jsonify({"success": True, "attempt": attempt.to_dict()}), 201

    @app.route("/api/quizzes/<int:quiz_id>/results", methods=["GET"], endpoint="quizzes_results")
    @login_required
    @json_errors("tải kết quả")
    def quizzes_results(quiz_id: int):
        return jsonify({"success": True, **container.quiz_service.results(quiz_id).to_dict()})
