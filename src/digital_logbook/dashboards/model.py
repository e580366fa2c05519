from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from ..attendance.model import Attendance
from ..subjects.model import Subject


@dataclass(frozen=True)
class AdminDashboard:
    total_students: int
    total_instructors: int
    working_students: int
    recent_logins: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class InstructorDashboard:
    subjects: List[Subject] = field(default_factory=list)
    attendance: List[Attendance] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "subjects": [s.to_dict() for s in self.subjects],
            "attendance": [a.to_dict() for a in self.attendance],
        }


@dataclass(frozen=True)
class StudentDashboard:
    attendance: List[Attendance] = field(default_factory=list)
    today_log: Optional[Attendance] = None

    def to_dict(self) -> dict:
        return {
            "attendance": [a.to_dict() for a in self.attendance],
            "today_log": self.today_log.to_dict() if self.today_log else None,
        }


@dataclass(frozen=True)
class WorkingStudentDashboard:
    students_registered: int
    classlists_created: int

    def to_dict(self) -> dict:
        return asdict(self)
