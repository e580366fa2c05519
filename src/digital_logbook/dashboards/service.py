from __future__ import annotations

from ..core.exceptions import ValidationError
from .model import AdminDashboard, InstructorDashboard, StudentDashboard, WorkingStudentDashboard
from .repository import DashboardSource


class DashboardService:
    def __init__(self, source: DashboardSource):
        self._source = source

    def get_admin_dashboard(self) -> AdminDashboard:
        return self._source.admin()

    def get_instructor_dashboard(self, instructor_name: str) -> InstructorDashboard:
        return self._source.instructor(instructor_name)

    def get_student_dashboard(self, student_id: int) -> StudentDashboard:
        try:
            student_id = int(student_id)
        except (TypeError, ValueError):
            raise ValidationError("student_id must be an integer")
        return self._source.student(student_id)

    def get_working_student_dashboard(self) -> WorkingStudentDashboard:
        return self._source.working_student()
