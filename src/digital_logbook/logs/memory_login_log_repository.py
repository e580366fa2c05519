from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from .model import LoginLog
from .repository import LoginLogRepository

logger = logging.getLogger(__name__)


class InMemoryLoginLogRepository(LoginLogRepository):
    """Mock mode keeps no session history: writes are dropped, reads are empty."""

    def create(
        self,
        *,
        user_id: int,
        login_time: datetime,
        user_name: str = "",
        user_type: str = "",
        pc_number: str = "",
    ) -> int:
        logger.debug("mock mode: login of user %s not recorded", user_id)
        return 0

    def close(self, log_id: int, *, logout_time: datetime) -> bool:
        logger.debug("mock mode: logout for log %s not recorded", log_id)
        return False

    def list_logs(self, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        return []

    def search(self, term: str, *, user_type: Optional[str] = None) -> Sequence[LoginLog]:
        return []
