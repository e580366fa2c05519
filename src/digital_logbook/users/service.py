from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import FrozenSet, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import compose_display_name, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import CredentialType, Role
from ..core.exceptions import InvalidCredentials, UserNotFound, ValidationError
from ..logs.repository import LoginLogRepository
from .model import User
from .repository import UserDirectory

logger = logging.getLogger(__name__)


def login_roles(credential_type: CredentialType) -> FrozenSet[Role]:
    """Roles allowed to sign in with the given kind of identifier."""
    if credential_type == CredentialType.USERNAME:
        return frozenset(Role)
    if credential_type == CredentialType.EMAIL:
        return frozenset({Role.ADMIN, Role.INSTRUCTOR})
    if credential_type == CredentialType.EMPLOYEE_ID:
        return frozenset({Role.INSTRUCTOR})
    if credential_type == CredentialType.STUDENT_ID:
        return frozenset({Role.STUDENT, Role.WORKING_STUDENT})
    raise ValidationError(f"unsupported credential type: {credential_type!r}")


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserDirectory, logs: Optional[LoginLogRepository] = None):
        self._users = users
        self._logs = logs

    def login(self, credential_type: CredentialType | str, identifier: str, password: str) -> User:
        try:
            kind = CredentialType(credential_type)
        except ValueError:
            raise ValidationError(f"unsupported credential type: {credential_type!r}")

        user = self._users.find_for_login(kind, identifier, login_roles(kind))
        if user is None or not self._users.check_password(user, kind, identifier, password):
            raise InvalidCredentials()

        self._log_login(user)
        return user.scrubbed()

    def login_by_username(self, username: str, password: str) -> User:
        return self.login(CredentialType.USERNAME, username, password)

    def login_by_email(self, email: str, password: str) -> User:
        return self.login(CredentialType.EMAIL, email, password)

    def login_by_employee_id(self, employee_id: str, password: str) -> User:
        return self.login(CredentialType.EMPLOYEE_ID, employee_id, password)

    def login_by_student_id(self, student_id: str, password: str) -> User:
        return self.login(CredentialType.STUDENT_ID, student_id, password)

    def _log_login(self, user: User) -> None:
        if self._logs is None:
            return
        try:
            self._logs.create(
                user_id=user.id,
                user_name=user.name,
                user_type=user.role.value,
                login_time=datetime.now(),
            )
        except Exception as e:
            # A failed audit row must not block the login itself.
            logger.warning("Failed to log login for user %s: %s", user.id, e)


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserDirectory):
        self._users = users

    def list_users(self, role: Optional[Role] = None):
        return self._users.list_users(role)

    def search_users(self, term: str, role: Optional[Role] = None):
        if not term or not term.strip():
            return self._users.list_users(role)
        return self._users.search_users(term.strip(), role)

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise UserNotFound()
        return user.scrubbed()

    def create_account(
        self,
        *,
        role: Role,
        id_number: str,
        first_name: str,
        last_name: str,
        middle_name: str = "",
        gender: str = "",
        email: str = "",
        year: str = "",
    ) -> int:
        """Create a user whose login name and initial password are the employee / student id."""
        id_number = require_non_empty(id_number, "Employee / Student ID")
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        middle_name = middle_name.strip()

        if self._users.find_for_login(CredentialType.USERNAME, id_number, frozenset(Role)):
            raise ValidationError("Username already exists")

        uses_student_id = role.uses_student_id
        return self._users.create_user(
            username=id_number,
            password_hash=generate_password_hash(id_number),
            name=compose_display_name(last_name, first_name, middle_name),
            role=role,
            email="" if uses_student_id else email.strip(),
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            gender="" if role == Role.ADMIN else gender.strip(),
            employee_id="" if uses_student_id else id_number,
            student_id=id_number if uses_student_id else "",
            year=year.strip() if uses_student_id else "",
        )

    def update_user(self, user_id: int, changes: dict) -> User:
        current = self._users.get_by_id(int(user_id))
        if not current:
            raise UserNotFound()

        allowed = {
            "username", "email", "name", "first_name", "middle_name", "last_name",
            "gender", "role", "employee_id", "student_id", "year",
        }
        changes = dict(changes)
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        for key, value in changes.items():
            if key != "role" and not isinstance(value, str):
                raise ValidationError(f"{key} must be a string")

        if "role" in changes:
            try:
                changes["role"] = Role(changes["role"])
            except (ValueError, TypeError):
                raise ValidationError("Invalid role")
            # Only one of employee_id / student_id applies to a role.
            if changes["role"].uses_student_id:
                changes["employee_id"] = ""
            else:
                changes["student_id"] = ""
        if "username" in changes:
            changes["username"] = require_non_empty(changes["username"], "Username")

        updated = replace(current, **changes)
        self._users.update_user(updated)
        return updated.scrubbed()

    def delete_user(self, user_id: int) -> None:
        if not self._users.delete_by_id(int(user_id)):
            raise UserNotFound()

    def update_photo(self, user_id: int, photo_url: str) -> None:
        if not self._users.update_photo(int(user_id), photo_url.strip()):
            raise UserNotFound()

    def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)

        current_hash = self._users.get_password_hash(int(user_id))
        if current_hash is None:
            raise UserNotFound()
        if not check_password_hash(current_hash, old_password):
            raise InvalidCredentials("incorrect current password")

        self._users.set_password_hash(int(user_id), generate_password_hash(new_password))
