from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def list_by_instructor(self, instructor_name: str) -> Sequence[Subject]:
        raise NotImplementedError

    def create(self, *, code: str, name: str, instructor: str, room: str) -> int:
        raise NotImplementedError
