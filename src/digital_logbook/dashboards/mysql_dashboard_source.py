from __future__ import annotations

from datetime import date

from ..attendance.model import Attendance
from ..common.datetime_utils import format_date, format_time
from ..core.enums import AttendanceStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from ..subjects.repository import SubjectRepository
from .model import AdminDashboard, InstructorDashboard, StudentDashboard, WorkingStudentDashboard
from .repository import DashboardSource


def _row_to_attendance(r: dict) -> Attendance:
    return Attendance(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        subject_id=int(r["subject_id"]),
        date=format_date(r["date"]),
        status=AttendanceStatus(r["status"]),
        time_in=format_time(normalize_mysql_time(r.get("time_in"))),
        time_out=format_time(normalize_mysql_time(r.get("time_out"))),
    )


def _count(cur, query: str, args: tuple = ()) -> int:
    cur.execute(query, args)
    row = fetchone(cur)
    return int(row["n"]) if row else 0


class MySQLDashboardSource(DashboardSource):
    def __init__(self, conn_factory: DatabaseConnection, subjects: SubjectRepository):
        self._conn_factory = conn_factory
        self._subjects = subjects

    def admin(self) -> AdminDashboard:
        role_count = "SELECT COUNT(*) AS n FROM users WHERE role=%s"
        with db_cursor(self._conn_factory) as (_, cur):
            return AdminDashboard(
                total_students=_count(cur, role_count, (Role.STUDENT.value,)),
                total_instructors=_count(cur, role_count, (Role.INSTRUCTOR.value,)),
                working_students=_count(cur, role_count, (Role.WORKING_STUDENT.value,)),
                recent_logins=_count(
                    cur, "SELECT COUNT(*) AS n FROM login_logs WHERE DATE(login_time)=%s", (date.today(),)
                ),
            )

    def instructor(self, instructor_name: str) -> InstructorDashboard:
        subjects = list(self._subjects.list_by_instructor(instructor_name))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, a.subject_id, a.date, a.status, a.time_in, a.time_out
                FROM attendance a
                JOIN users u ON a.student_id = u.id
                JOIN subjects s ON a.subject_id = s.id
                WHERE a.date = %s AND s.instructor = %s
                ORDER BY u.name
                """,
                (date.today(), instructor_name),
            )
            attendance = [_row_to_attendance(r) for r in fetchall(cur)]
        return InstructorDashboard(subjects=subjects, attendance=attendance)

    def student(self, student_id: int) -> StudentDashboard:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, a.subject_id, a.date, a.status, a.time_in, a.time_out
                FROM attendance a
                WHERE a.student_id = %s
                ORDER BY a.date DESC
                """,
                (student_id,),
            )
            attendance = [_row_to_attendance(r) for r in fetchall(cur)]

            cur.execute(
                """
                SELECT a.id, a.student_id, a.subject_id, a.date, a.status, a.time_in, a.time_out
                FROM attendance a
                WHERE a.student_id = %s AND a.date = %s
                ORDER BY a.time_in DESC
                LIMIT 1
                """,
                (student_id, date.today()),
            )
            row = fetchone(cur)

        return StudentDashboard(attendance=attendance, today_log=_row_to_attendance(row) if row else None)

    def working_student(self) -> WorkingStudentDashboard:
        with db_cursor(self._conn_factory) as (_, cur):
            return WorkingStudentDashboard(
                students_registered=_count(
                    cur, "SELECT COUNT(*) AS n FROM users WHERE role=%s", (Role.STUDENT.value,)
                ),
                classlists_created=_count(cur, "SELECT COUNT(*) AS n FROM classlists"),
            )
