from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/feedback", methods=["GET"], endpoint="list_feedback")
    def list_feedback():
        return jsonify([f.to_dict() for f in container.feedback_service.list_feedback()])

    @app.route("/api/feedback", methods=["POST"], endpoint="submit_feedback")
    def submit_feedback():
        data = json_body()
        try:
            student_id = int(data.get("student_id") or 0)
        except (TypeError, ValueError):
            raise ValidationError("student_id must be an integer")

        fields = ("student_name", "student_id_str", "pc_number", "time_in", "time_out", "equipment", "condition", "comment")
        new_id = container.feedback_service.submit_feedback(
            student_id=student_id,
            **{name: str(data.get(name, "")) for name in fields},
        )
        return jsonify({"success": True, "id": new_id}), 201
