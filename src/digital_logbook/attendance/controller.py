from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, require_field
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        data = json_body()
        try:
            student_id = int(require_field(data, "student_id"))
            subject_id = int(require_field(data, "subject_id"))
        except (TypeError, ValueError):
            raise ValidationError("student_id and subject_id must be integers")

        attendance_id = container.attendance_service.record_attendance(
            student_id,
            subject_id,
            str(require_field(data, "status")),
        )
        return jsonify({"success": True, "id": attendance_id})
