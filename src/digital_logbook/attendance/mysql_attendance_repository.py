from __future__ import annotations

from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_id(self, *, student_id: int, subject_id: int, work_date: date) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id FROM attendance WHERE student_id=%s AND subject_id=%s AND date=%s",
                (student_id, subject_id, work_date),
            )
            row = fetchone(cur)
            return int(row["id"]) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance (student_id, subject_id, date, status, time_in, time_out)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (student_id, subject_id, work_date, status.value, time_in, time_out),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        time_in: Optional[time],
        time_out: Optional[time],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET status=%s, time_in=%s, time_out=%s WHERE id=%s",
                (status.value, time_in, time_out, attendance_id),
            )
            return cur.rowcount > 0
