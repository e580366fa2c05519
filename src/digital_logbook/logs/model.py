from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LoginLog:
    """One lab session: who logged in, on which PC, and when they left."""

    id: int
    user_id: int
    user_name: str
    user_type: str
    pc_number: str
    login_time: str
    logout_time: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
