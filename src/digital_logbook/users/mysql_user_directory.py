from __future__ import annotations

from typing import AbstractSet, Optional, Sequence

from werkzeug.security import check_password_hash

from ..common.datetime_utils import format_datetime
from ..common.nulls import to_optional_string
from ..core.enums import CredentialType, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, text
from .model import User
from .repository import UserDirectory

_COLUMNS = (
    "id, username, email, name, first_name, middle_name, last_name, gender, role, "
    "employee_id, student_id, year, photo_url, created"
)

# Whitelisted lookup columns; never interpolate caller input into SQL.
_LOGIN_COLUMNS = {
    CredentialType.USERNAME: "username",
    CredentialType.EMAIL: "email",
    CredentialType.EMPLOYEE_ID: "employee_id",
    CredentialType.STUDENT_ID: "student_id",
}


def _row_to_user(r: dict) -> User:
    return User(
        id=int(r["id"]),
        username=r["username"],
        email=text(r, "email"),
        name=r["name"],
        first_name=text(r, "first_name"),
        middle_name=text(r, "middle_name"),
        last_name=text(r, "last_name"),
        gender=text(r, "gender"),
        role=Role(r["role"]),
        employee_id=text(r, "employee_id"),
        student_id=text(r, "student_id"),
        year=text(r, "year"),
        photo_url=text(r, "photo_url"),
        created=format_datetime(r.get("created")),
        password=text(r, "password"),
    )


class MySQLUserDirectory(UserDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_login(self, credential_type: CredentialType, identifier: str, roles: AbstractSet[Role]) -> Optional[User]:
        column = _LOGIN_COLUMNS[credential_type]
        ordered_roles = sorted(r.value for r in roles)
        placeholders = ", ".join(["%s"] * len(ordered_roles))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, password
                FROM users
                WHERE {column}=%s AND role IN ({placeholders})
                ORDER BY id
                LIMIT 1
                """,
                (identifier, *ordered_roles),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def check_password(self, user: User, credential_type: CredentialType, identifier: str, password: str) -> bool:
        try:
            return check_password_hash(user.password, password)
        except (ValueError, TypeError):
            # e.g. legacy or placeholder hashes the hasher cannot parse
            return False

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def list_users(self, role: Optional[Role] = None) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            if role is None:
                cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY created DESC")
            else:
                cur.execute(f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY created DESC", (role.value,))
            return [_row_to_user(r) for r in fetchall(cur)]

    def search_users(self, term: str, role: Optional[Role] = None) -> Sequence[User]:
        like = f"%{term}%"
        query = f"""
            SELECT {_COLUMNS}
            FROM users
            WHERE (name LIKE %s OR username LIKE %s OR student_id LIKE %s OR employee_id LIKE %s OR gender LIKE %s)
        """
        args: list = [like, like, like, like, like]
        if role is not None:
            query += " AND role=%s"
            args.append(role.value)
        query += " ORDER BY created DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(args))
            return [_row_to_user(r) for r in fetchall(cur)]

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        role: Role,
        email: str = "",
        first_name: str = "",
        middle_name: str = "",
        last_name: str = "",
        gender: str = "",
        employee_id: str = "",
        student_id: str = "",
        year: str = "",
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, email, password, name, first_name, middle_name, last_name,
                                  gender, role, employee_id, student_id, year)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    username,
                    to_optional_string(email).db_value,
                    password_hash,
                    name,
                    to_optional_string(first_name).db_value,
                    to_optional_string(middle_name).db_value,
                    to_optional_string(last_name).db_value,
                    to_optional_string(gender).db_value,
                    role.value,
                    to_optional_string(employee_id).db_value,
                    to_optional_string(student_id).db_value,
                    to_optional_string(year).db_value,
                ),
            )
            return int(cur.lastrowid)

    def update_user(self, user: User) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET username=%s, email=%s, name=%s, first_name=%s, middle_name=%s, last_name=%s,
                    gender=%s, role=%s, employee_id=%s, student_id=%s, year=%s
                WHERE id=%s
                """,
                (
                    user.username,
                    to_optional_string(user.email).db_value,
                    user.name,
                    to_optional_string(user.first_name).db_value,
                    to_optional_string(user.middle_name).db_value,
                    to_optional_string(user.last_name).db_value,
                    to_optional_string(user.gender).db_value,
                    user.role.value,
                    to_optional_string(user.employee_id).db_value,
                    to_optional_string(user.student_id).db_value,
                    to_optional_string(user.year).db_value,
                    user.id,
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0

    def update_photo(self, user_id: int, photo_url: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET photo_url=%s WHERE id=%s",
                (to_optional_string(photo_url).db_value, user_id),
            )
            return cur.rowcount > 0

    def get_password_hash(self, user_id: int) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT password FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return row["password"] if row else None

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET password=%s WHERE id=%s", (password_hash, user_id))
            return cur.rowcount > 0
