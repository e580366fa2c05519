from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        return jsonify([s.to_dict() for s in container.subject_service.list_subjects()])

    @app.route("/api/subjects", methods=["POST"], endpoint="create_subject")
    def create_subject():
        data = json_body()
        new_id = container.subject_service.create_subject(
            code=str(data.get("code", "")),
            name=str(data.get("name", "")),
            instructor=str(data.get("instructor", "")),
            room=str(data.get("room", "")),
        )
        return jsonify({"success": True, "id": new_id}), 201
