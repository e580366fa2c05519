"""Fixed roster used when no database is reachable.

Login names double as passwords in mock mode: the username for admins (and
for email login), the employee id for instructors, the student id for
students and working students.
"""

from __future__ import annotations

from typing import Tuple

from ..common.datetime_utils import format_datetime, now_local
from ..core.enums import Role
from ..subjects.model import Subject
from ..users.model import User


class MockDataStore:
    """Immutable fixture: seeded once at construction, no mutation operations."""

    def __init__(self):
        created = format_datetime(now_local())

        def admin(id_: int, username: str, email: str, first: str, last: str, name: str) -> User:
            return User(
                id=id_, username=username, email=email, name=name, first_name=first, last_name=last,
                role=Role.ADMIN, employee_id=username, created=created,
            )

        def instructor(id_: int, employee_id: str, email: str, first: str, last: str) -> User:
            return User(
                id=id_, username=employee_id, email=email, name=f"{last}, {first}", first_name=first,
                last_name=last, role=Role.INSTRUCTOR, employee_id=employee_id, created=created,
            )

        def student(id_: int, student_id: str, first: str, last: str, year: str = "", *, role: Role = Role.STUDENT) -> User:
            return User(
                id=id_, username=student_id, name=f"{last}, {first}", first_name=first, last_name=last,
                role=role, student_id=student_id, year=year, created=created,
            )

        self._users: Tuple[User, ...] = (
            admin(1, "admin", "admin@university.edu", "System", "Administrator", "System Administrator"),
            admin(2, "admin2", "admin2@university.edu", "Maria", "Dela Cruz", "Dela Cruz, Maria"),
            instructor(3, "EMP-001", "mreyes@university.edu", "Miguel", "Reyes"),
            instructor(4, "EMP-002", "sgarcia@university.edu", "Sofia", "Garcia"),
            instructor(5, "EMP-003", "jtorres@university.edu", "Juan", "Torres"),
            student(6, "2025-1234", "Juan", "Santos", "2nd Yr BSIT"),
            student(7, "2025-5678", "Maria", "Cruz", "2nd Yr BSIT"),
            student(8, "2025-9012", "Carlos", "Lopez", "3rd Yr BSIT"),
            student(9, "2025-3456", "Ana", "Martinez", "1st Yr BSIT"),
            student(10, "2025-7890", "Luis", "Rodriguez", "4th Yr BSIT"),
            student(11, "2025-WS01", "Jose", "Rivera", role=Role.WORKING_STUDENT),
            student(12, "2025-WS02", "Pedro", "Gonzalez", role=Role.WORKING_STUDENT),
        )

        self._subjects: Tuple[Subject, ...] = (
            Subject(id=1, code="IT101", name="Programming Fundamentals", instructor="Reyes, Miguel", room="Lab A"),
            Subject(id=2, code="IT202", name="Database Management", instructor="Reyes, Miguel", room="Lab B"),
            Subject(id=3, code="IT303", name="Web Development", instructor="Garcia, Sofia", room="Lab C"),
            Subject(id=4, code="IT404", name="Software Engineering", instructor="Torres, Juan", room="Lab D"),
            Subject(id=5, code="IT505", name="Network Security", instructor="Garcia, Sofia", room="Lab E"),
        )

    @property
    def users(self) -> Tuple[User, ...]:
        return self._users

    @property
    def subjects(self) -> Tuple[Subject, ...]:
        return self._subjects

    def credentials_banner(self) -> str:
        lines = [
            "=== MOCK LOGIN CREDENTIALS ===",
            "Use these credentials for testing without database connection:",
        ]
        sections = (
            ("ADMIN USERS (Login with Username):", (Role.ADMIN,), "Username", "username"),
            ("INSTRUCTOR USERS (Login with Employee ID):", (Role.INSTRUCTOR,), "Employee ID", "employee_id"),
            ("STUDENT USERS (Login with Student ID):", (Role.STUDENT,), "Student ID", "student_id"),
            ("WORKING STUDENT USERS (Login with Student ID):", (Role.WORKING_STUDENT,), "Student ID", "student_id"),
        )
        for title, roles, label, attr in sections:
            lines.append("")
            lines.append(title)
            for u in self._users:
                if u.role in roles:
                    login = getattr(u, attr)
                    suffix = "" if u.role == Role.ADMIN else f"  ({u.first_name} {u.last_name})"
                    lines.append(f"  {label}: {login}, Password: {login}{suffix}")
        lines.append("")
        lines.append("NOTE: In mock mode, password matches the credential ID")
        return "\n".join(lines)
