from __future__ import annotations

from typing import Protocol

from .model import AdminDashboard, InstructorDashboard, StudentDashboard, WorkingStudentDashboard


class DashboardSource(Protocol):
    """Read-only projections, one per role."""

    def admin(self) -> AdminDashboard:
        raise NotImplementedError

    def instructor(self, instructor_name: str) -> InstructorDashboard:
        raise NotImplementedError

    def student(self, student_id: int) -> StudentDashboard:
        raise NotImplementedError

    def working_student(self) -> WorkingStudentDashboard:
        raise NotImplementedError
