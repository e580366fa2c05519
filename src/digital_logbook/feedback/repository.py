from __future__ import annotations

from typing import Protocol, Sequence

from .model import Feedback


class FeedbackRepository(Protocol):
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
        raise NotImplementedError

    def list_all(self) -> Sequence[Feedback]:
        raise NotImplementedError
