from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role; decides which login strategy and dashboard apply."""

    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"
    WORKING_STUDENT = "working_student"

    @property
    def uses_student_id(self) -> bool:
        return self in (Role.STUDENT, Role.WORKING_STUDENT)


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"
    SEAT_IN = "Seat-in"


class CredentialType(str, Enum):
    """Which identifier the caller supplied on the login form."""

    USERNAME = "username"
    EMAIL = "email"
    EMPLOYEE_ID = "employee_id"
    STUDENT_ID = "student_id"
