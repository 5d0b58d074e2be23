from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import json_errors, login_required, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @json_errors("đăng nhập")
    def login():
        data = request_data()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=7)

        session["profile_id"] = s_user.profile_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value

        return jsonify(
            {
                "success": True,
                "message": "Đăng nhập thành công!",
                "user": {"profile_id": s_user.profile_id, "full_name": s_user.full_name, "role": s_user.role.value},
            }
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Đã đăng xuất hệ thống."})

    @app.route("/api/admin/profiles", methods=["GET"], endpoint="admin_profiles")
    @login_required
    @json_errors("tải danh sách người dùng")
    def admin_profiles():
        profiles = container.profile_service.search(request.args.get("q", ""))
        return jsonify({"success": True, "profiles": [p.to_dict() for p in profiles]})

    @app.route("/api/admin/profiles/<int:profile_id>/role", methods=["POST"], endpoint="admin_profile_role")
    @login_required
    @json_errors("cập nhật vai trò")
    def admin_profile_role(profile_id: int):
        data = request_data()
        container.profile_service.change_role(profile_id=profile_id, new_role=data.get("role", ""))
        return jsonify({"success": True, "message": "Đã cập nhật vai trò."})
