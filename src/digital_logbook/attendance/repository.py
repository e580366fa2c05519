from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus


class AttendanceRepository(Protocol):
    def find_id(self, *, student_id: int, subject_id: int, work_date: date) -> Optional[int]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_id: int,
        subject_id: int,
        work_date: date,
        status: AttendanceStatus,
        time_in: Optional[time],
        time_out: Optional[time],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        time_in: Optional[time],
        time_out: Optional[time],
    ) -> bool:
        raise NotImplementedError
