from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.tally_ledger.tally_ledger.common.datetime_utils import resolve_range
from src.tally_ledger.tally_ledger.core.enums import EntryKind, Role
from src.tally_ledger.tally_ledger.core.exceptions import AuthorizationError, ValidationError
from src.tally_ledger.tally_ledger.entries.model import Entry
from src.tally_ledger.tally_ledger.entries.service import EntryService
from src.tally_ledger.tally_ledger.extras.model import ExtraExpenditure
from src.tally_ledger.tally_ledger.extras.service import ExtraService


class InMemoryEntries:
    def __init__(self):
        self.rows: list[Entry] = []

    def create_entry(self, *, company_id, recorder_id, kind, amount, entry_date, category=None, description=None) -> int:
        entry_id = len(self.rows) + 1
        self.rows.append(
            Entry(
                entry_id=entry_id,
                company_id=company_id,
                recorder_id=recorder_id,
                kind=kind,
                amount=amount,
                entry_date=entry_date,
                recorded_at=datetime(2024, 1, 1, 0, 0, entry_id),
                category=category,
                description=description,
            )
        )
        return entry_id

    def list_range(self, *, company_id: int, start: date, end: date):
        return [e for e in self.rows if e.company_id == company_id and start <= e.entry_date <= end]


class InMemoryExtras:
    def __init__(self):
        self.rows: list[ExtraExpenditure] = []

    def create_extra(self, *, company_id, expense_date, amount, description=None) -> int:
        extra_id = len(self.rows) + 1
        self.rows.append(
            ExtraExpenditure(
                extra_id=extra_id,
                company_id=company_id,
                expense_date=expense_date,
                amount=amount,
                description=description,
            )
        )
        return extra_id

    def list_range(self, *, company_id: int, start: date, end: date):
        return [x for x in self.rows if x.company_id == company_id and start <= x.expense_date <= end]


def test_record_normalizes_input():
    repo = InMemoryEntries()
    svc = EntryService(repo)

    svc.record(
        company_id=1,
        user_id=2,
        kind="in",
        amount="12.50",
        entry_date="2024-01-05T13:45:00Z",
        category="  Sales ",
        description="",
    )

    e = repo.rows[0]
    assert e.kind == EntryKind.IN
    assert e.amount == Decimal("12.50")
    assert e.entry_date == date(2024, 1, 5)
    assert e.category == "Sales"
    assert e.description is None


@pytest.mark.parametrize(
    "kind, amount, entry_date",
    [
        (None, 10, "2024-01-01"),
        ("IN", None, "2024-01-01"),
        ("IN", 10, None),
        ("SIDEWAYS", 10, "2024-01-01"),
        ("OUT", -5, "2024-01-01"),
        ("OUT", "abc", "2024-01-01"),
        ("OUT", 5, "01/02/2024"),
        ("IN", "0.125", "2024-01-01"),
        ("IN", "1e20", "2024-01-01"),
    ],
)
def test_record_rejects_bad_input(kind, amount, entry_date):
    svc = EntryService(InMemoryEntries())

    with pytest.raises(ValidationError):
        svc.record(company_id=1, user_id=1, kind=kind, amount=amount, entry_date=entry_date)


def test_zero_amount_is_allowed():
    repo = InMemoryEntries()
    EntryService(repo).record(company_id=1, user_id=1, kind="OUT", amount=0, entry_date="2024-01-01")

    assert repo.rows[0].amount == 0


def test_list_entries_newest_first_and_tenant_scoped():
    repo = InMemoryEntries()
    svc = EntryService(repo)
    svc.record(company_id=1, user_id=1, kind="IN", amount=1, entry_date="2024-01-01")
    svc.record(company_id=1, user_id=1, kind="IN", amount=2, entry_date="2024-01-03")
    svc.record(company_id=2, user_id=5, kind="IN", amount=3, entry_date="2024-01-02")
    svc.record(company_id=1, user_id=1, kind="OUT", amount=4, entry_date="2024-01-03")

    listed = svc.list_entries(company_id=1, date_range=resolve_range())

    assert [e.entry_id for e in listed] == [4, 2, 1]


def test_extras_are_admin_only():
    repo = InMemoryExtras()
    svc = ExtraService(repo)

    with pytest.raises(AuthorizationError):
        svc.record(current_role=Role.EMPLOYEE, company_id=1, expense_date="2024-01-15", amount=20)

    svc.record(current_role=Role.ADMIN, company_id=1, expense_date="2024-01-15", amount="20", description="Rent")
    listed = svc.list_extras(company_id=1, date_range=resolve_range("2024-01-01", "2024-01-31"))
    assert [(x.amount, x.description) for x in listed] == [(Decimal("20"), "Rent")]


def test_extra_requires_date_and_amount():
    svc = ExtraService(InMemoryExtras())

    with pytest.raises(ValidationError):
        svc.record(current_role=Role.ADMIN, company_id=1, expense_date=None, amount=5)
    with pytest.raises(ValidationError):
        svc.record(current_role=Role.ADMIN, company_id=1, expense_date="2024-01-01", amount=None)


def test_record_rejects_text_longer_than_columns():
    repo = InMemoryEntries()
    svc = EntryService(repo)

    with pytest.raises(ValidationError, match="category"):
        svc.record(company_id=1, user_id=1, kind="IN", amount=1, entry_date="2024-01-01", category="c" * 101)
    with pytest.raises(ValidationError, match="description"):
        svc.record(company_id=1, user_id=1, kind="IN", amount=1, entry_date="2024-01-01", description="d" * 256)
    with pytest.raises(ValidationError, match="description"):
        ExtraService(InMemoryExtras()).record(
            current_role=Role.ADMIN, company_id=1, expense_date="2024-01-01", amount=1, description="d" * 256
        )
    assert repo.rows == []
