from __future__ import annotations

import logging
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_text, require_email, require_min_length, require_non_empty
from ..companies.repository import CompanyRepository
from ..core.constants import MAX_PHONE_LENGTH, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository
from .tokens import TokenSigner

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: register a company admin, log in."""

    def __init__(self, users: UserRepository, companies: CompanyRepository, tokens: TokenSigner):
        self._users = users
        self._companies = companies
        self._tokens = tokens

    def register(
        self,
        *,
        company_name: str,
        company_email: str,
        name: str,
        email: str,
        password: str,
        company_phone: Optional[str] = None,
    ) -> str:
        """Create (or join by name) a company and its admin; return a bearer token."""

        company_name = require_non_empty(company_name, "companyName")
        company_email = require_email(company_email, "companyEmail")
        name = require_non_empty(name, "name")
        email = require_email(email, "email")
        require_non_empty(password, "password")
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("Email already in use")

        company = self._companies.get_by_name(company_name)
        if company:
            company_id = company.company_id
        else:
            company_id = self._companies.create_company(
                name=company_name,
                email=company_email,
                phone=optional_text(company_phone, "companyPhone", MAX_PHONE_LENGTH),
            )
            logger.info("Created company %s (id=%s)", company_name, company_id)

        user_id = self._users.create_user(
            company_id=company_id,
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.ADMIN,
        )
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Registration failed")
        return self._tokens.issue(user)

    def login(self, email: str, password: str) -> str:
        if not email or not password:
            raise ValidationError("email, password required")

        user = self._users.get_by_email(str(email).strip().lower())
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")
        return self._tokens.issue(user)


class UserService:
    """Use case: manage company users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("User no longer exists")
        return user

    def create_employee(
        self,
        *,
        current_role: Role,
        company_id: int,
        name: str,
        email: str,
        password: str,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")

        name = require_non_empty(name, "name")
        email = require_email(email, "email")
        require_non_empty(password, "password")
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("Email already in use")

        return self._users.create_user(
            company_id=int(company_id),
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.EMPLOYEE,
        )

    def list_company_users(self, *, current_role: Role, company_id: int) -> Sequence[User]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")
        return self._users.list_by_company(int(company_id))
