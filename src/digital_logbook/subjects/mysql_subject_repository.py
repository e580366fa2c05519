from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Subject
from .repository import SubjectRepository


def _row_to_subject(r: dict) -> Subject:
    return Subject(id=int(r["id"]), code=r["code"], name=r["name"], instructor=r["instructor"], room=r["room"])


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, code, name, instructor, room FROM subjects ORDER BY code")
            return [_row_to_subject(r) for r in fetchall(cur)]

    def list_by_instructor(self, instructor_name: str) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, code, name, instructor, room FROM subjects WHERE instructor=%s ORDER BY code",
                (instructor_name,),
            )
            return [_row_to_subject(r) for r in fetchall(cur)]

    def create(self, *, code: str, name: str, instructor: str, room: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO subjects (code, name, instructor, room) VALUES (%s, %s, %s, %s)",
                (code, name, instructor, room),
            )
            return int(cur.lastrowid)
