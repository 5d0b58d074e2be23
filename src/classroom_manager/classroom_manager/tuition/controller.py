from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.web import json_errors, login_required, request_data
from ..container import Container
from ..core.constants import DEFAULT_OVERDUE_LIMIT, DEFAULT_TUITION_AMOUNT


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tuitions", methods=["GET"], endpoint="tuitions_list")
    @login_required
    @json_errors("tải học phí")
    def tuitions_list():
        tuitions = container.tuition_service.list_tuitions(status=request.args.get("status", "all"))
        return jsonify({"success": True, "tuitions": [t.to_dict() for t in tuitions]})

    @app.route("/api/tuitions", methods=["POST"], endpoint="tuitions_create")
    @login_required
    @json_errors("tạo phiếu thu")
    def tuitions_create():
        data = request_data()
        today = now_local().date()
        tuition_id = container.tuition_service.create_tuition(
            student_id=data.get("student_id"),
            amount=data.get("amount", DEFAULT_TUITION_AMOUNT),
            period=data.get("period"),
            due_date=parse_optional_date(data.get("due_date"), default=today),
            note=data.get("note"),
            today=today,
        )
        return jsonify({"success": True, "tuition_id": tuition_id, "message": "Đã tạo phiếu thu."}), 201

    @app.route("/api/tuitions/<int:tuition_id>/paid", methods=["POST"], endpoint="tuitions_paid")
    @login_required
    @json_errors("cập nhật phiếu thu")
    def tuitions_paid(tuition_id: int):
        container.tuition_service.mark_paid(tuition_id)
        return jsonify({"success": True, "message": "Đã xác nhận thu tiền."})

    @app.route("/api/tuitions/overdue", methods=["GET"], endpoint="tuitions_overdue")
    @login_required
    @json_errors("tải học phí quá hạn")
    def tuitions_overdue():
        as_of = parse_optional_date(request.args.get("as_of"), default=now_local().date())
        limit = request.args.get("limit", type=int) or DEFAULT_OVERDUE_LIMIT
        rows = container.tuition_service.list_overdue(as_of, limit=limit)
        return jsonify(
            {
                "success": True,
                "overdue": [
                    {
                        "tuition_id": r.tuition_id,
                        "student_name": r.student_name,
                        "class_name": r.class_name,
                        "amount": r.amount,
                        "period": r.period,
                        "due_date": r.due_date.strftime("%Y-%m-%d"),
                    }
                    for r in rows
                ],
            }
        )

    @app.route("/api/tuitions/overdue.csv", methods=["GET"], endpoint="tuitions_overdue_csv")
    @login_required
    @json_errors("xuất học phí quá hạn")
    def tuitions_overdue_csv():
        as_of = parse_optional_date(request.args.get("as_of"), default=now_local().date())
        filename = f"hoc_phi_qua_han_{as_of.strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            container.tuition_service.overdue_csv(as_of),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
