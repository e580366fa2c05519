from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_datetime, format_time
from ..common.nulls import to_optional_int, to_optional_string
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time, text
from .model import Feedback
from .repository import FeedbackRepository


class MySQLFeedbackRepository(FeedbackRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        student_id: int,
        student_name: str,
        student_id_str: str,
        pc_number: str,
        time_in: str,
        time_out: str,
        equipment: str,
        condition: str,
        comment: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO feedback (student_id, student_name, student_id_str, pc_number, time_in, time_out,
                                      equipment, `condition`, comment)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    to_optional_int(student_id).db_value,
                    to_optional_string(student_name).db_value,
                    to_optional_string(student_id_str).db_value,
                    to_optional_string(pc_number).db_value,
                    to_optional_string(time_in).db_value,
                    to_optional_string(time_out).db_value,
                    equipment,
                    condition,
                    to_optional_string(comment).db_value,
                ),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Feedback]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT f.id, f.student_id, f.student_name, f.student_id_str, f.pc_number, f.time_in, f.time_out,
                       f.equipment, f.`condition`, f.comment, f.date
                FROM feedback f
                ORDER BY f.date DESC
                """
            )
            return [
                Feedback(
                    id=int(r["id"]),
                    student_id=int(r["student_id"] or 0),
                    student_name=text(r, "student_name"),
                    student_id_str=text(r, "student_id_str"),
                    pc_number=text(r, "pc_number"),
                    time_in=format_time(normalize_mysql_time(r.get("time_in"))),
                    time_out=format_time(normalize_mysql_time(r.get("time_out"))),
                    equipment=r["equipment"],
                    condition=r["condition"],
                    comment=text(r, "comment"),
                    date=format_datetime(r.get("date")),
                )
                for r in fetchall(cur)
            ]
