from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/overview", methods=["GET"], endpoint="dashboard_overview")
    @login_required
    @json_errors("tải tổng quan")
    def dashboard_overview():
        svc = container.orchestration_service
        overview = svc.overview()
        return jsonify({"success": True, **overview.to_dict(svc.agenda)})
