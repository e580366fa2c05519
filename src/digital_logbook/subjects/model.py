from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Subject:
    """A class offering. `instructor` is the instructor's display name, not a foreign key."""

    id: int
    code: str
    name: str
    instructor: str
    room: str

    def to_dict(self) -> dict:
        return asdict(self)
