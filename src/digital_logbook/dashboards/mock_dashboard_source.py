from __future__ import annotations

from ..attendance.model import Attendance
from ..common.datetime_utils import today_iso
from ..core import constants
from ..core.enums import AttendanceStatus
from ..mock.fixtures import MockDataStore
from .model import AdminDashboard, InstructorDashboard, StudentDashboard, WorkingStudentDashboard
from .repository import DashboardSource

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT
SEAT_IN = AttendanceStatus.SEAT_IN


class MockDashboardSource(DashboardSource):
    """Canned dashboards.

    Content does not depend on the caller's ids, except that the student
    views echo the given student id and the "today" rows carry today's date.
    """

    def __init__(self, store: MockDataStore):
        self._store = store

    def admin(self) -> AdminDashboard:
        return AdminDashboard(
            total_students=constants.MOCK_ADMIN_TOTAL_STUDENTS,
            total_instructors=constants.MOCK_ADMIN_TOTAL_INSTRUCTORS,
            working_students=constants.MOCK_ADMIN_WORKING_STUDENTS,
            recent_logins=constants.MOCK_ADMIN_RECENT_LOGINS,
        )

    def instructor(self, instructor_name: str) -> InstructorDashboard:
        subjects = [s for s in self._store.subjects if s.instructor == instructor_name]

        # Sample rows are attached even when the instructor teaches nothing.
        today = today_iso()
        attendance = [
            Attendance(id=1, student_id=6, subject_id=1, date=today, status=PRESENT, time_in="08:00:00", time_out="10:00:00"),
            Attendance(id=2, student_id=7, subject_id=1, date=today, status=PRESENT, time_in="08:05:00", time_out="10:00:00"),
            Attendance(id=3, student_id=8, subject_id=1, date=today, status=ABSENT),
            Attendance(id=4, student_id=9, subject_id=1, date=today, status=SEAT_IN, time_in="08:15:00", time_out="10:00:00"),
        ]
        return InstructorDashboard(subjects=subjects, attendance=attendance)

    def student(self, student_id: int) -> StudentDashboard:
        attendance = [
            Attendance(id=1, student_id=student_id, subject_id=1, date="2024-01-15", status=PRESENT, time_in="08:00:00", time_out="10:00:00"),
            Attendance(id=2, student_id=student_id, subject_id=2, date="2024-01-16", status=PRESENT, time_in="10:00:00", time_out="12:00:00"),
            Attendance(id=3, student_id=student_id, subject_id=1, date="2024-01-17", status=ABSENT),
        ]
        today_log = Attendance(
            id=4,
            student_id=student_id,
            subject_id=1,
            date=today_iso(),
            status=PRESENT,
            time_in="08:00:00",
            time_out="10:00:00",
        )
        return StudentDashboard(attendance=attendance, today_log=today_log)

    def working_student(self) -> WorkingStudentDashboard:
        return WorkingStudentDashboard(
            students_registered=constants.MOCK_STUDENTS_REGISTERED,
            classlists_created=constants.MOCK_CLASSLISTS_CREATED,
        )
