from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Feedback:
    """Equipment report filed by a student at the end of a lab session."""

    id: int
    student_id: int
    student_name: str
    student_id_str: str
    pc_number: str
    time_in: str
    time_out: str
    equipment: str
    condition: str
    comment: str
    date: str

    def to_dict(self) -> dict:
        return asdict(self)
