from __future__ import annotations

from ..common.validators import require_non_empty
from .repository import FeedbackRepository


class FeedbackService:
    """Use case: equipment condition reports."""

    def __init__(self, feedback: FeedbackRepository):
        self._feedback = feedback

    def submit_feedback(
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
        comment: str = "",
    ) -> int:
        return self._feedback.create(
            student_id=int(student_id),
            student_name=student_name.strip(),
            student_id_str=student_id_str.strip(),
            pc_number=pc_number.strip(),
            time_in=time_in.strip(),
            time_out=time_out.strip(),
            equipment=require_non_empty(equipment, "Equipment"),
            condition=require_non_empty(condition, "Condition"),
            comment=comment.strip(),
        )

    def list_feedback(self):
        return self._feedback.list_all()
