from __future__ import annotations

from typing import AbstractSet, Optional, Sequence

from ..core.enums import CredentialType, Role
from ..core.exceptions import DatabaseUnavailable
from ..mock.fixtures import MockDataStore
from .model import User
from .repository import UserDirectory

_READ_ONLY = "not available in mock data mode (no database connection)"


class InMemoryUserDirectory(UserDirectory):
    """UserDirectory over the fixture roster. Read-only; linear scans in insertion order."""

    def __init__(self, store: MockDataStore):
        self._store = store

    def find_for_login(self, credential_type: CredentialType, identifier: str, roles: AbstractSet[Role]) -> Optional[User]:
        attr = credential_type.value
        for user in self._store.users:
            if getattr(user, attr) == identifier and user.role in roles:
                return user.scrubbed()
        return None

    def check_password(self, user: User, credential_type: CredentialType, identifier: str, password: str) -> bool:
        # Placeholder scheme: email logins use the username as password,
        # every other credential type uses the identifier itself.
        if credential_type == CredentialType.EMAIL:
            return password == user.username
        return password == identifier

    def get_by_id(self, user_id: int) -> Optional[User]:
        for user in self._store.users:
            if user.id == user_id:
                return user.scrubbed()
        return None

    def list_users(self, role: Optional[Role] = None) -> Sequence[User]:
        return [u.scrubbed() for u in self._store.users if role is None or u.role == role]

    def search_users(self, term: str, role: Optional[Role] = None) -> Sequence[User]:
        needle = term.lower()
        out = []
        for u in self.list_users(role):
            haystack = (u.name, u.username, u.student_id, u.employee_id, u.gender)
            if any(needle in value.lower() for value in haystack):
                out.append(u)
        return out

    def create_user(self, **kwargs) -> int:
        raise DatabaseUnavailable(f"create user {_READ_ONLY}")

    def update_user(self, user: User) -> bool:
        raise DatabaseUnavailable(f"update user {_READ_ONLY}")

    def delete_by_id(self, user_id: int) -> bool:
        raise DatabaseUnavailable(f"delete user {_READ_ONLY}")

    def update_photo(self, user_id: int, photo_url: str) -> bool:
        raise DatabaseUnavailable(f"update photo {_READ_ONLY}")

    def get_password_hash(self, user_id: int) -> Optional[str]:
        raise DatabaseUnavailable(f"change password {_READ_ONLY}")

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        raise DatabaseUnavailable(f"change password {_READ_ONLY}")
