"""Helpers shared by the JSON controllers."""

from __future__ import annotations

from typing import Optional

from flask import jsonify, request

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    DatabaseUnavailable,
    DomainError,
    UserNotFound,
    ValidationError,
)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def require_field(data: dict, name: str):
    if name not in data or data[name] is None:
        raise ValidationError(f"Missing field: {name}")
    return data[name]


def optional_role(value: Optional[str]) -> Optional[Role]:
    if not value:
        return None
    try:
        return Role(value)
    except ValueError:
        raise ValidationError(f"Invalid role: {value!r}")


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, UserNotFound):
        return 404
    if isinstance(error, DatabaseUnavailable):
        return 503
    return 400
