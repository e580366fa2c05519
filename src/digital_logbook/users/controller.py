from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_body, optional_role, require_field
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        user = container.auth_service.login(
            data.get("credential_type", "username"),
            str(require_field(data, "identifier")).strip(),
            str(require_field(data, "password")),
        )
        logger.info("Login ok: user=%s role=%s", user.id, user.role.value)
        return jsonify(user.to_dict())

    @app.route("/api/auth/change-password", methods=["POST"], endpoint="change_password")
    def change_password():
        data = json_body()
        container.user_service.change_password(
            int(require_field(data, "user_id")),
            str(data.get("old_password") or ""),
            str(data.get("new_password") or ""),
        )
        return jsonify({"success": True, "message": "Password updated"})

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    def list_users():
        role = optional_role(request.args.get("role"))
        term = request.args.get("q", "")
        users = container.user_service.search_users(term, role)
        return jsonify([u.to_dict() for u in users])

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: int):
        return jsonify(container.user_service.get_user(user_id).to_dict())

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    def create_user():
        data = json_body()
        role = optional_role(data.get("role"))
        if role is None:
            raise ValidationError("Missing field: role")

        new_id = container.user_service.create_account(
            role=role,
            id_number=str(data.get("id_number", "")),
            first_name=str(data.get("first_name", "")),
            last_name=str(data.get("last_name", "")),
            middle_name=str(data.get("middle_name", "")),
            gender=str(data.get("gender", "")),
            email=str(data.get("email", "")),
            year=str(data.get("year", "")),
        )
        logger.info("Created %s account id=%s", role.value, new_id)
        return jsonify({"success": True, "id": new_id}), 201

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: int):
        updated = container.user_service.update_user(user_id, json_body())
        return jsonify(updated.to_dict())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: int):
        container.user_service.delete_user(user_id)
        return jsonify({"success": True})

    @app.route("/api/users/<int:user_id>/photo", methods=["PUT"], endpoint="update_user_photo")
    def update_user_photo(user_id: int):
        data = json_body()
        container.user_service.update_photo(user_id, str(require_field(data, "photo_url")))
        return jsonify({"success": True})
