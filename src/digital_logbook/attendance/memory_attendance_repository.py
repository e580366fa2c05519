from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import DatabaseUnavailable
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Mock attendance is generated per query and never stored."""

    def find_id(self, *, student_id: int, subject_id: int, work_date: date) -> Optional[int]:
        return None

    def create(self, **kwargs) -> int:
        raise DatabaseUnavailable("recording attendance is not available in mock data mode")

    def update(self, **kwargs) -> bool:
        raise DatabaseUnavailable("recording attendance is not available in mock data mode")
