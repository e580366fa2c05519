from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one student's attendance for one subject on one day.

    `time_in` / `time_out` are "HH:MM:SS", or "" when the student was absent.
    """

    id: int
    student_id: int
    subject_id: int
    date: str
    status: AttendanceStatus
    time_in: str = ""
    time_out: str = ""

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data
