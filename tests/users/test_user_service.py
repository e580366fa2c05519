from __future__ import annotations

from dataclasses import replace

import pytest
from werkzeug.security import check_password_hash, generate_password_hash

from digital_logbook.core.enums import CredentialType, Role
from digital_logbook.core.exceptions import InvalidCredentials, UserNotFound, ValidationError
from digital_logbook.users.model import User
from digital_logbook.users.service import AuthService, UserService, login_roles


class FakeUsers:
    """Writable in-memory directory with hashed passwords."""

    def __init__(self):
        self._next_id = 1
        self.users: dict[int, User] = {}
        self.hashes: dict[int, str] = {}

    def add(self, *, username, password, role=Role.STUDENT, **fields):
        uid = self._next_id
        self._next_id += 1
        self.users[uid] = User(id=uid, username=username, name=fields.pop("name", username), role=role, **fields)
        self.hashes[uid] = generate_password_hash(password)
        return uid

    def find_for_login(self, credential_type, identifier, roles):
        for u in self.users.values():
            if getattr(u, credential_type.value) == identifier and u.role in roles:
                return u
        return None

    def check_password(self, user, credential_type, identifier, password):
        return check_password_hash(self.hashes[user.id], password)

    def get_by_id(self, user_id):
        return self.users.get(user_id)

    def list_users(self, role=None):
        return [u for u in self.users.values() if role is None or u.role == role]

    def search_users(self, term, role=None):
        return [u for u in self.list_users(role) if term.lower() in u.name.lower()]

    def create_user(self, *, password_hash, **fields):
        uid = self._next_id
        self._next_id += 1
        self.users[uid] = User(id=uid, **fields)
        self.hashes[uid] = password_hash
        return uid

    def update_user(self, user):
        self.users[user.id] = user
        return True

    def delete_by_id(self, user_id):
        return self.users.pop(user_id, None) is not None

    def update_photo(self, user_id, photo_url):
        if user_id not in self.users:
            return False
        self.users[user_id] = replace(self.users[user_id], photo_url=photo_url)
        return True

    def get_password_hash(self, user_id):
        return self.hashes.get(user_id)

    def set_password_hash(self, user_id, password_hash):
        self.hashes[user_id] = password_hash
        return True


class FakeLogs:
    def __init__(self, fail=False):
        self.created = []
        self.fail = fail

    def create(self, **kwargs):
        if self.fail:
            raise RuntimeError("login_logs unavailable")
        self.created.append(kwargs)
        return len(self.created)


def test_login_roles_per_credential_type():
    assert login_roles(CredentialType.USERNAME) == frozenset(Role)
    assert login_roles(CredentialType.EMAIL) == {Role.ADMIN, Role.INSTRUCTOR}
    assert login_roles(CredentialType.EMPLOYEE_ID) == {Role.INSTRUCTOR}
    assert login_roles(CredentialType.STUDENT_ID) == {Role.STUDENT, Role.WORKING_STUDENT}


def test_successful_login_writes_a_session_row():
    users, logs = FakeUsers(), FakeLogs()
    uid = users.add(username="jdoe", password="pw123456", name="Doe, John")

    user = AuthService(users, logs).login_by_username("jdoe", "pw123456")

    assert user.id == uid
    assert logs.created[0]["user_id"] == uid
    assert logs.created[0]["user_name"] == "Doe, John"
    assert logs.created[0]["user_type"] == "student"


def test_login_survives_a_failing_session_log():
    users = FakeUsers()
    users.add(username="jdoe", password="pw123456")

    user = AuthService(users, FakeLogs(fail=True)).login_by_username("jdoe", "pw123456")

    assert user.username == "jdoe"


def test_get_user_raises_when_missing():
    with pytest.raises(UserNotFound):
        UserService(FakeUsers()).get_user(99)


def test_create_student_account_uses_id_as_login_and_password():
    users = FakeUsers()
    svc = UserService(users)

    uid = svc.create_account(
        role=Role.STUDENT,
        id_number="2026-0001",
        first_name="Ana",
        last_name="Reyes",
        middle_name="Luz",
        email="ignored@university.edu",
        year="1st Yr BSIT",
    )

    created = users.users[uid]
    assert created.username == "2026-0001"
    assert created.student_id == "2026-0001"
    assert created.employee_id == ""
    assert created.email == ""
    assert created.name == "Reyes, Ana Luz"
    assert check_password_hash(users.hashes[uid], "2026-0001")


def test_create_instructor_account_fills_employee_id():
    users = FakeUsers()

    uid = UserService(users).create_account(
        role=Role.INSTRUCTOR, id_number="EMP-010", first_name="Lea", last_name="Sy", email="lsy@university.edu",
    )

    created = users.users[uid]
    assert created.employee_id == "EMP-010"
    assert created.student_id == ""
    assert created.email == "lsy@university.edu"
    assert created.name == "Sy, Lea"


def test_create_account_rejects_duplicate_username():
    users = FakeUsers()
    users.add(username="EMP-010", password="x")

    with pytest.raises(ValidationError):
        UserService(users).create_account(role=Role.INSTRUCTOR, id_number="EMP-010", first_name="A", last_name="B")


def test_update_user_rejects_unknown_fields_and_bad_roles():
    users = FakeUsers()
    uid = users.add(username="jdoe", password="x")
    svc = UserService(users)

    with pytest.raises(ValidationError):
        svc.update_user(uid, {"password": "hacked"})
    with pytest.raises(ValidationError):
        svc.update_user(uid, {"role": "superuser"})

    updated = svc.update_user(uid, {"role": "working_student", "year": "3rd Yr"})
    assert updated.role == Role.WORKING_STUDENT
    assert users.users[uid].year == "3rd Yr"


def test_delete_and_photo_report_missing_users():
    svc = UserService(FakeUsers())

    with pytest.raises(UserNotFound):
        svc.delete_user(5)
    with pytest.raises(UserNotFound):
        svc.update_photo(5, "/photos/5.png")


def test_change_password_rejects_short_passwords():
    users = FakeUsers()
    uid = users.add(username="jdoe", password="oldpass1")

    with pytest.raises(ValidationError):
        UserService(users).change_password(uid, "oldpass1", "12345")


def test_change_password_checks_current_password():
    users = FakeUsers()
    uid = users.add(username="jdoe", password="oldpass1")
    svc = UserService(users)

    with pytest.raises(InvalidCredentials):
        svc.change_password(uid, "wrong", "newpass1")

    svc.change_password(uid, "oldpass1", "newpass1")
    assert check_password_hash(users.hashes[uid], "newpass1")


def test_change_password_for_missing_user():
    with pytest.raises(UserNotFound):
        UserService(FakeUsers()).change_password(42, "whatever", "newpass1")


def test_blank_search_lists_everyone():
    users = FakeUsers()
    users.add(username="a", password="x", name="Santos, Juan")
    users.add(username="b", password="x", name="Cruz, Maria", role=Role.INSTRUCTOR)
    svc = UserService(users)

    assert len(svc.search_users("  ")) == 2
    assert [u.username for u in svc.search_users("cruz")] == ["b"]
    assert svc.search_users("", Role.INSTRUCTOR)[0].username == "b"


@pytest.mark.parametrize("changes", [{"username": 123}, {"email": 5}, {"year": None}, {"name": ["a"]}])
def test_update_user_rejects_non_string_values(changes):
    users = FakeUsers()
    uid = users.add(username="jdoe", password="x")

    with pytest.raises(ValidationError):
        UserService(users).update_user(uid, changes)

    assert users.users[uid].username == "jdoe"


def test_update_user_rejects_unhashable_role():
    users = FakeUsers()
    uid = users.add(username="jdoe", password="x")

    with pytest.raises(ValidationError):
        UserService(users).update_user(uid, {"role": ["admin"]})


def test_role_change_clears_the_other_id():
    users = FakeUsers()
    uid = users.add(username="EMP-010", password="x", role=Role.INSTRUCTOR, employee_id="EMP-010")
    svc = UserService(users)

    svc.update_user(uid, {"role": "student", "student_id": "2026-0002"})
    assert (users.users[uid].employee_id, users.users[uid].student_id) == ("", "2026-0002")

    svc.update_user(uid, {"role": "instructor", "employee_id": "EMP-011"})
    assert (users.users[uid].employee_id, users.users[uid].student_id) == ("EMP-011", "")
