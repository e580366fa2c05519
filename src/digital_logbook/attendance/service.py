from __future__ import annotations

from datetime import datetime

from ..common.nulls import to_optional_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_attendance(
        self,
        student_id: int,
        subject_id: int,
        status: AttendanceStatus | str,
        *,
        now: datetime | None = None,
    ) -> int:
        """Record today's attendance; a second call for the same student/subject/day overwrites it.

        Returns the attendance row id.
        """
        now = now or datetime.now()
        today = now.date()
        stamp = now.time().replace(microsecond=0)

        student = to_optional_int(int(student_id))
        subject = to_optional_int(int(subject_id))
        if not student.valid or not subject.valid:
            raise ValidationError("student_id and subject_id are required")

        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {status!r}")

        # Absent rows carry no times.
        time_in = time_out = None if status == AttendanceStatus.ABSENT else stamp

        existing_id = self._attendance.find_id(student_id=student.value, subject_id=subject.value, work_date=today)
        if existing_id:
            self._attendance.update(attendance_id=existing_id, status=status, time_in=time_in, time_out=time_out)
            return existing_id

        return self._attendance.create(
            student_id=student.value,
            subject_id=subject.value,
            work_date=today,
            status=status,
            time_in=time_in,
            time_out=time_out,
        )
