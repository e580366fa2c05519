from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_field
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/logs", methods=["GET"], endpoint="list_logs")
    def list_logs():
        user_type = request.args.get("user_type") or None
        logs = container.login_log_service.search_logs(request.args.get("q", ""), user_type=user_type)
        return jsonify([log.to_dict() for log in logs])

    @app.route("/api/logs", methods=["POST"], endpoint="record_login")
    def record_login():
        data = json_body()
        try:
            user_id = int(require_field(data, "user_id"))
        except (TypeError, ValueError):
            raise ValidationError("user_id must be an integer")

        log_id = container.login_log_service.record_login(
            user_id=user_id,
            user_name=str(data.get("user_name", "")),
            user_type=str(data.get("user_type", "")),
            pc_number=str(data.get("pc_number", "")),
        )
        return jsonify({"success": True, "id": log_id}), 201

    @app.route("/api/logs/<int:log_id>/logout", methods=["POST"], endpoint="record_logout")
    def record_logout(log_id: int):
        container.login_log_service.record_logout(log_id)
        return jsonify({"success": True})
