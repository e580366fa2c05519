from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..common.nulls import to_optional_string
from ..core.enums import Role
from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

# (username, email, password, name, first, last, role, employee_id, student_id, year)
SAMPLE_USERS = [
    ("admin", "admin@university.edu", "admin123", "System Administrator", "System", "Administrator", Role.ADMIN, "admin", "", ""),
    ("instructor1", "mreyes@university.edu", "inst123", "Mr. Reyes", "Mr.", "Reyes", Role.INSTRUCTOR, "instructor1", "", ""),
    ("2025-1234", "", "2025-1234", "Santos, Juan", "Juan", "Santos", Role.STUDENT, "", "2025-1234", "2nd Yr BSIT"),
    ("2025-5678", "", "2025-5678", "Cruz, Maria", "Maria", "Cruz", Role.STUDENT, "", "2025-5678", "2nd Yr BSIT"),
    ("working1", "", "working1", "Working Student", "Working", "Student", Role.WORKING_STUDENT, "", "working1", ""),
]

SAMPLE_SUBJECTS = [
    ("IT101", "Programming Fundamentals", "Mr. Reyes", "Lab A"),
    ("IT202", "Database Management", "Mr. Reyes", "Lab B"),
]


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for the schema file (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = _strip_comments("".join(buf))
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = _strip_comments("".join(buf))
    if tail:
        yield tail


def _strip_comments(stmt: str) -> str:
    lines = [line for line in stmt.splitlines() if not line.strip().startswith("--")]
    return "\n".join(lines).strip()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)


def ensure_sample_data(conn_factory: DatabaseConnection) -> None:
    """Insert the sample users and subjects unless they already exist."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for username, email, password, name, first, last, role, employee_id, student_id, year in SAMPLE_USERS:
            cur.execute(
                """
                INSERT IGNORE INTO users
                    (username, email, password, name, first_name, last_name, role, employee_id, student_id, year)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    username,
                    to_optional_string(email).db_value,
                    generate_password_hash(password),
                    name,
                    first,
                    last,
                    role.value,
                    to_optional_string(employee_id).db_value,
                    to_optional_string(student_id).db_value,
                    to_optional_string(year).db_value,
                ),
            )
            if cur.rowcount > 0:
                logger.info("Inserted sample user %s (%s)", username, role.value)
            else:
                logger.debug("Sample user %s already exists, skipping", username)

        for code, name, instructor, room in SAMPLE_SUBJECTS:
            cur.execute(
                "INSERT IGNORE INTO subjects (code, name, instructor, room) VALUES (%s, %s, %s, %s)",
                (code, name, instructor, room),
            )
            if cur.rowcount > 0:
                logger.info("Inserted sample subject %s", code)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
