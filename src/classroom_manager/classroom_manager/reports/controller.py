from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/management", methods=["GET"], endpoint="management_report")
    @login_required
    @json_errors("tải báo cáo")
    def management_report():
        today = now_local().date()
        start = parse_optional_date(request.args.get("start"), default=today.replace(day=1))
        end = parse_optional_date(request.args.get("end"), default=today)
        period = request.args.get("period") or None

        report = container.report_service.build(start=start, end=end, as_of=today, period=period)
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "revenue": report.revenue,
                "attendance": report.attendance,
                "totals": report.totals,
            }
        )
