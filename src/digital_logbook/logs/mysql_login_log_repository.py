from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_datetime
from ..common.nulls import to_optional_string
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, text
from .model import LoginLog
from .repository import LoginLogRepository

_SELECT = """
    SELECT id, user_id, user_name, user_type, pc_number, login_time, logout_time
    FROM login_logs
"""


def _row_to_log(r: dict) -> LoginLog:
    return LoginLog(
        id=int(r["id"]),
        user_id=int(r["user_id"] or 0),
        user_name=text(r, "user_name"),
        user_type=text(r, "user_type"),
        pc_number=text(r, "pc_number"),
        login_time=format_datetime(r.get("login_time")),
        logout_time=format_datetime(r.get("logout_time")),
    )


class MySQLLoginLogRepository(LoginLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: int,
        login_time: datetime,
        user_name: str = "",
        user_type: str = "",
        pc_number: str = "",
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO login_logs (user_id, user_name, user_type, pc_number, login_time)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (
                    user_id,
                    to_optional_string(user_name).db_value,
                    to_optional_string(user_type).db_value,
                    to_optional_string(pc_number).db_value,
                    login_time,
                ),
            )
            return int(cur.lastrowid)

    def close(self, log_id: int, *, logout_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE login_logs SET logout_time=%s WHERE id=%s", (logout_time, log_id))
            return cur.rowcount > 0

    def list_logs(self, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            if user_type:
                cur.execute(_SELECT + " WHERE user_type=%s ORDER BY login_time DESC", (user_type,))
            else:
                cur.execute(_SELECT + " ORDER BY login_time DESC")
            return [_row_to_log(r) for r in fetchall(cur)]

    def search(self, term: str, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        like = f"%{term}%"
        query = _SELECT + " WHERE (user_name LIKE %s OR pc_number LIKE %s OR DATE(login_time) LIKE %s)"
        args: list = [like, like, like]
        if user_type:
            query += " AND user_type=%s"
            args.append(user_type)
        query += " ORDER BY login_time DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(args))
            return [_row_to_log(r) for r in fetchall(cur)]
