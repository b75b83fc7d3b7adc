from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a person who records entries and clocks shifts.

    Note: Pure data object (no DB access code).
    """

    user_id: int
    company_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None

    def profile(self) -> dict:
        return {
            "id": self.user_id,
            "company_id": self.company_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
