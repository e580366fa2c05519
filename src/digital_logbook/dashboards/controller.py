from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/admin", methods=["GET"], endpoint="admin_dashboard")
    def admin_dashboard():
        return jsonify(container.dashboard_service.get_admin_dashboard().to_dict())

    @app.route("/api/dashboard/instructor", methods=["GET"], endpoint="instructor_dashboard")
    def instructor_dashboard():
        name = request.args.get("name", "")
        return jsonify(container.dashboard_service.get_instructor_dashboard(name).to_dict())

    @app.route("/api/dashboard/student/<student_id>", methods=["GET"], endpoint="student_dashboard")
    def student_dashboard(student_id: str):
        return jsonify(container.dashboard_service.get_student_dashboard(student_id).to_dict())

    @app.route("/api/dashboard/working-student", methods=["GET"], endpoint="working_student_dashboard")
    def working_student_dashboard():
        return jsonify(container.dashboard_service.get_working_student_dashboard().to_dict())
