from __future__ import annotations

from typing import Sequence

from ..core.exceptions import DatabaseUnavailable
from ..mock.fixtures import MockDataStore
from .model import Subject
from .repository import SubjectRepository


class InMemorySubjectRepository(SubjectRepository):
    def __init__(self, store: MockDataStore):
        self._store = store

    def list_all(self) -> Sequence[Subject]:
        return list(self._store.subjects)

    def list_by_instructor(self, instructor_name: str) -> Sequence[Subject]:
        # Exact string match on the denormalized display name.
        return [s for s in self._store.subjects if s.instructor == instructor_name]

    def create(self, *, code: str, name: str, instructor: str, room: str) -> int:
        raise DatabaseUnavailable("creating subjects is not available in mock data mode")
