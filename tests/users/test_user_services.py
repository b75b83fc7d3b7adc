from __future__ import annotations

from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.tally_ledger.tally_ledger.companies.model import Company
from src.tally_ledger.tally_ledger.core.enums import Role
from src.tally_ledger.tally_ledger.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from src.tally_ledger.tally_ledger.users.model import User
from src.tally_ledger.tally_ledger.users.service import AuthService, UserService
from src.tally_ledger.tally_ledger.users.tokens import TokenSigner


class InMemoryCompanies:
    def __init__(self):
        self._rows: dict[int, Company] = {}

    def get_by_id(self, company_id: int) -> Optional[Company]:
        return self._rows.get(company_id)

    def get_by_name(self, name: str) -> Optional[Company]:
        return next((c for c in self._rows.values() if c.name == name), None)

    def create_company(self, *, name: str, email: str, phone: Optional[str] = None) -> int:
        company_id = len(self._rows) + 1
        self._rows[company_id] = Company(company_id=company_id, name=name, email=email, phone=phone)
        return company_id


class InMemoryUsers:
    def __init__(self):
        self._rows: dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._rows.values() if u.email == email), None)

    def create_user(self, *, company_id: int, name: str, email: str, password_hash: str, role: Role) -> int:
        user_id = len(self._rows) + 1
        self._rows[user_id] = User(
            user_id=user_id,
            company_id=company_id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        return user_id

    def list_by_company(self, company_id: int):
        return [u for u in reversed(list(self._rows.values())) if u.company_id == company_id]


def _auth():
    users = InMemoryUsers()
    companies = InMemoryCompanies()
    tokens = TokenSigner("test-secret")
    return AuthService(users, companies, tokens), users, companies, tokens


def _register(auth, **overrides):
    payload = dict(
        company_name="Acme",
        company_email="books@acme.test",
        name="Root",
        email="Root@Acme.test",
        password="secret1",
    )
    payload.update(overrides)
    return auth.register(**payload)


def test_register_creates_company_and_admin():
    auth, users, companies, tokens = _auth()

    claims = tokens.verify(_register(auth))

    assert claims.role == Role.ADMIN
    assert claims.email == "root@acme.test"
    assert companies.get_by_id(claims.company_id).name == "Acme"


def test_register_joins_existing_company_by_name():
    auth, users, companies, tokens = _auth()

    first = tokens.verify(_register(auth))
    second = tokens.verify(_register(auth, email="other@acme.test"))

    assert first.company_id == second.company_id


def test_register_rejects_duplicate_email_and_short_password():
    auth, *_ = _auth()
    _register(auth)

    with pytest.raises(ValidationError, match="Email already in use"):
        _register(auth, email="root@acme.test")
    with pytest.raises(ValidationError):
        _register(auth, email="new@acme.test", password="123")


def test_login_checks_password():
    auth, users, companies, tokens = _auth()
    _register(auth)

    assert tokens.verify(auth.login("root@acme.test", "secret1")).name == "Root"
    with pytest.raises(AuthenticationError):
        auth.login("root@acme.test", "wrong-pass")
    with pytest.raises(AuthenticationError):
        auth.login("nobody@acme.test", "secret1")
    with pytest.raises(ValidationError):
        auth.login("", "")


def test_login_tolerates_unusable_hash():
    auth, users, companies, tokens = _auth()
    users.create_user(company_id=1, name="X", email="x@acme.test", password_hash="placeholder", role=Role.EMPLOYEE)

    with pytest.raises(AuthenticationError):
        auth.login("x@acme.test", "whatever")


def test_only_admin_creates_employees():
    users = InMemoryUsers()
    svc = UserService(users)

    with pytest.raises(AuthorizationError):
        svc.create_employee(current_role=Role.EMPLOYEE, company_id=1, name="E", email="e@acme.test", password="secret1")

    user_id = svc.create_employee(current_role=Role.ADMIN, company_id=1, name="E", email="E@acme.test", password="secret1")
    created = users.get_by_id(user_id)
    assert created.role == Role.EMPLOYEE
    assert created.email == "e@acme.test"
    assert created.password_hash != "secret1"


def test_list_company_users_is_tenant_scoped():
    users = InMemoryUsers()
    users.create_user(company_id=1, name="A", email="a@a.test", password_hash=generate_password_hash("x"), role=Role.ADMIN)
    users.create_user(company_id=2, name="B", email="b@b.test", password_hash=generate_password_hash("x"), role=Role.ADMIN)
    svc = UserService(users)

    listed = svc.list_company_users(current_role=Role.ADMIN, company_id=1)

    assert [u.name for u in listed] == ["A"]
    with pytest.raises(AuthorizationError):
        svc.list_company_users(current_role=Role.EMPLOYEE, company_id=1)
