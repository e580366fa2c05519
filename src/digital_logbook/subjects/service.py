from __future__ import annotations

from ..common.validators import require_non_empty
from .repository import SubjectRepository


class SubjectService:
    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def list_subjects(self):
        return self._subjects.list_all()

    def create_subject(self, *, code: str, name: str, instructor: str, room: str) -> int:
        return self._subjects.create(
            code=require_non_empty(code, "Subject code"),
            name=require_non_empty(name, "Subject name"),
            instructor=require_non_empty(instructor, "Instructor"),
            room=require_non_empty(room, "Room"),
        )
