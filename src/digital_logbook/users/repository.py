from __future__ import annotations

from typing import AbstractSet, Optional, Protocol, Sequence

from ..core.enums import CredentialType, Role
from .model import User


class UserDirectory(Protocol):
    """Repository interface for users.

    Note (DIP): services depend on this interface. The container picks the
    MySQL-backed or the fixture-backed implementation once at startup.
    """

    def find_for_login(self, credential_type: CredentialType, identifier: str, roles: AbstractSet[Role]) -> Optional[User]:
        """First user (insertion order) whose identifier matches and whose role is in `roles`."""
        raise NotImplementedError

    def check_password(self, user: User, credential_type: CredentialType, identifier: str, password: str) -> bool:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def list_users(self, role: Optional[Role] = None) -> Sequence[User]:
        raise NotImplementedError

    def search_users(self, term: str, role: Optional[Role] = None) -> Sequence[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        role: Role,
        email: str = "",
        first_name: str = "",
        middle_name: str = "",
        last_name: str = "",
        gender: str = "",
        employee_id: str = "",
        student_id: str = "",
        year: str = "",
    ) -> int:
        raise NotImplementedError

    def update_user(self, user: User) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def update_photo(self, user_id: int, photo_url: str) -> bool:
        raise NotImplementedError

    def get_password_hash(self, user_id: int) -> Optional[str]:
        raise NotImplementedError

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        raise NotImplementedError
