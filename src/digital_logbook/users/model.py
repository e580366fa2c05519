from __future__ import annotations

from dataclasses import asdict, dataclass, replace

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; `password` holds the stored hash (or nothing in
    the mock roster) and is blanked by `scrubbed()` before leaving a service.
    """

    id: int
    username: str
    name: str
    role: Role
    email: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    gender: str = ""
    employee_id: str = ""
    student_id: str = ""
    year: str = ""
    photo_url: str = ""
    created: str = ""
    password: str = ""

    def scrubbed(self) -> "User":
        return replace(self, password="")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        data["password"] = ""
        return data
