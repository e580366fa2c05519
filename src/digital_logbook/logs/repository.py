from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import LoginLog


class LoginLogRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        login_time: datetime,
        user_name: str = "",
        user_type: str = "",
        pc_number: str = "",
    ) -> int:
        raise NotImplementedError

    def close(self, log_id: int, *, logout_time: datetime) -> bool:
        raise NotImplementedError

    def list_logs(self, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        raise NotImplementedError

    def search(self, term: str, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        raise NotImplementedError
