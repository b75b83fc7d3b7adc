from __future__ import annotations

from dataclasses import dataclass

from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .core.constants import DEFAULT_TOKEN_MAX_AGE_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .extras.mysql_extra_repository import MySQLExtraRepository
from .extras.repository import ExtraRepository
from .extras.service import ExtraService
from .reports.service import ReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenSigner


@dataclass(frozen=True)
class Container:
    """Everything a request needs: repositories, services and the token signer.

    Built once per app; nothing here is a module-level global.
    """

    companies_repo: CompanyRepository
    users_repo: UserRepository
    entries_repo: EntryRepository
    extras_repo: ExtraRepository
    shifts_repo: ShiftRepository

    tokens: TokenSigner

    auth_service: AuthService
    user_service: UserService
    entry_service: EntryService
    extra_service: ExtraService
    shift_service: ShiftService
    report_service: ReportService


def wire_container(
    *,
    companies_repo: CompanyRepository,
    users_repo: UserRepository,
    entries_repo: EntryRepository,
    extras_repo: ExtraRepository,
    shifts_repo: ShiftRepository,
    tokens: TokenSigner,
) -> Container:
    return Container(
        companies_repo=companies_repo,
        users_repo=users_repo,
        entries_repo=entries_repo,
        extras_repo=extras_repo,
        shifts_repo=shifts_repo,
        tokens=tokens,
        auth_service=AuthService(users_repo, companies_repo, tokens),
        user_service=UserService(users_repo),
        entry_service=EntryService(entries_repo),
        extra_service=ExtraService(extras_repo),
        shift_service=ShiftService(shifts_repo),
        report_service=ReportService(entries_repo, extras_repo, shifts_repo),
    )


def build_container(
    *,
    db_config: dict,
    secret_key: str,
    token_max_age_days: int = DEFAULT_TOKEN_MAX_AGE_DAYS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return wire_container(
        companies_repo=MySQLCompanyRepository(conn),
        users_repo=MySQLUserRepository(conn),
        entries_repo=MySQLEntryRepository(conn),
        extras_repo=MySQLExtraRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        tokens=TokenSigner(secret_key, max_age_days=token_max_age_days),
    )
