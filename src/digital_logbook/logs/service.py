from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .repository import LoginLogRepository


class LoginLogService:
    """Use case: lab session log (who used which PC, and when)."""

    def __init__(self, logs: LoginLogRepository):
        self._logs = logs

    def record_login(
        self,
        *,
        user_id: int,
        user_name: str,
        user_type: str,
        pc_number: str = "",
        now: Optional[datetime] = None,
    ) -> int:
        if int(user_id) <= 0:
            raise ValidationError("user_id is required")
        user_name = require_non_empty(user_name, "user_name")
        return self._logs.create(
            user_id=int(user_id),
            user_name=user_name,
            user_type=user_type,
            pc_number=pc_number.strip(),
            login_time=now or datetime.now(),
        )

    def record_logout(self, log_id: int, *, now: Optional[datetime] = None) -> None:
        self._logs.close(int(log_id), logout_time=now or datetime.now())

    def list_logs(self, *, user_type: Optional[str] = None):
        return self._logs.list_logs(user_type=user_type or None)

    def search_logs(self, term: str, *, user_type: Optional[str] = None):
        if not term or not term.strip():
            return self.list_logs(user_type=user_type)
        return self._logs.search(term.strip(), user_type=user_type or None)
