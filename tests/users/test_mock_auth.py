from __future__ import annotations

from dataclasses import replace

import pytest

from digital_logbook.core.enums import CredentialType, Role
from digital_logbook.core.exceptions import InvalidCredentials, ValidationError
from digital_logbook.mock.fixtures import MockDataStore

STORE = MockDataStore()


@pytest.mark.parametrize("user", STORE.users, ids=lambda u: u.username)
def test_every_seeded_user_logs_in_with_username(mock_container, user):
    logged_in = mock_container.auth_service.login_by_username(user.username, user.username)

    assert logged_in.id == user.id
    assert logged_in.role == user.role
    assert logged_in.password == ""


def test_wrong_password_is_rejected(mock_container):
    with pytest.raises(InvalidCredentials):
        mock_container.auth_service.login_by_username("admin", "admin123")


def test_unknown_user_and_wrong_password_share_one_message(mock_container):
    with pytest.raises(InvalidCredentials) as unknown:
        mock_container.auth_service.login_by_username("nobody", "nobody")
    with pytest.raises(InvalidCredentials) as wrong:
        mock_container.auth_service.login_by_username("admin", "nope")

    assert str(unknown.value) == str(wrong.value)


def test_email_login_uses_username_as_password(mock_container):
    admin = mock_container.auth_service.login_by_email("admin@university.edu", "admin")
    instructor = mock_container.auth_service.login_by_email("mreyes@university.edu", "EMP-001")

    assert admin.role == Role.ADMIN
    assert instructor.name == "Reyes, Miguel"


@pytest.mark.parametrize("user", [u for u in STORE.users if u.role.uses_student_id], ids=lambda u: u.username)
def test_email_login_never_succeeds_for_students(mock_container, user):
    with pytest.raises(InvalidCredentials):
        mock_container.auth_service.login_by_email(user.email, user.username)


def test_employee_id_login_is_instructor_only(mock_container):
    user = mock_container.auth_service.login_by_employee_id("EMP-002", "EMP-002")
    assert user.role == Role.INSTRUCTOR

    # Admins carry an employee id too, but cannot use this entry point.
    with pytest.raises(InvalidCredentials):
        mock_container.auth_service.login_by_employee_id("admin", "admin")


@pytest.mark.parametrize("student_id,role", [("2025-1234", Role.STUDENT), ("2025-WS01", Role.WORKING_STUDENT)])
def test_student_id_login(mock_container, student_id, role):
    user = mock_container.auth_service.login_by_student_id(student_id, student_id)

    assert user.role == role
    assert user.student_id == student_id


def test_student_id_login_rejects_staff(mock_container):
    for staff in ("admin", "EMP-001"):
        with pytest.raises(InvalidCredentials):
            mock_container.auth_service.login_by_student_id(staff, staff)


def test_unknown_credential_type_is_a_validation_error(mock_container):
    with pytest.raises(ValidationError):
        mock_container.auth_service.login("nickname", "admin", "admin")


def test_login_accepts_credential_type_value(mock_container):
    user = mock_container.auth_service.login(CredentialType.STUDENT_ID.value, "2025-5678", "2025-5678")

    assert user.name == "Cruz, Maria"


def test_returned_users_are_copies(mock_container, store):
    user = mock_container.auth_service.login_by_username("admin", "admin")
    changed = replace(user, name="Changed")

    assert changed.name == "Changed"
    assert store.users[0].name == "System Administrator"
    assert mock_container.user_service.get_user(1).name == "System Administrator"
