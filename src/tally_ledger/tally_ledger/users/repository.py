from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        company_id: int,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def list_by_company(self, company_id: int) -> Sequence[User]:
        """Company users, newest first."""

        raise NotImplementedError
