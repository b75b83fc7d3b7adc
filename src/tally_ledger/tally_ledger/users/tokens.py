from __future__ import annotations

from dataclasses import dataclass

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_MAX_AGE_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import User


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a bearer token."""

    user_id: int
    company_id: int
    role: Role
    email: str
    name: str


class TokenSigner:
    """Issue and verify signed, time-limited bearer tokens.

    The secret is injected by the container; there is no module-level key.
    """

    SALT = "tally-ledger-auth"

    def __init__(self, secret_key: str, *, max_age_days: int = DEFAULT_TOKEN_MAX_AGE_DAYS):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._serializer = URLSafeTimedSerializer(secret_key, salt=self.SALT)
        self._max_age_seconds = int(max_age_days) * 24 * 60 * 60

    def issue(self, user: User) -> str:
        return self._serializer.dumps(
            {
                "user_id": user.user_id,
                "company_id": user.company_id,
                "role": user.role.value,
                "email": user.email,
                "name": user.name,
            }
        )

    def verify(self, token: str) -> TokenClaims:
        try:
            data = self._serializer.loads(token, max_age=self._max_age_seconds)
        except SignatureExpired:
            raise AuthenticationError("Token expired")
        except BadData:
            raise AuthenticationError("Invalid token")

        try:
            return TokenClaims(
                user_id=int(data["user_id"]),
                company_id=int(data["company_id"]),
                role=Role(data["role"]),
                email=str(data["email"]),
                name=str(data["name"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token")
