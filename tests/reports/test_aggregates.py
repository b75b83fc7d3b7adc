from datetime import date, datetime
from decimal import Decimal

import pytest

from src.tally_ledger.tally_ledger.common.datetime_utils import resolve_range
from src.tally_ledger.tally_ledger.core.enums import EntryKind, Period
from src.tally_ledger.tally_ledger.core.exceptions import InvalidPeriod
from src.tally_ledger.tally_ledger.entries.model import Entry
from src.tally_ledger.tally_ledger.extras.model import ExtraExpenditure
from src.tally_ledger.tally_ledger.reports.aggregates import (
    compute_by_category,
    compute_by_employee,
    compute_summary,
    compute_totals,
)


def _entry(entry_id, kind, amount, day, *, user_id=1, user_name=None, category=None):
    return Entry(
        entry_id=entry_id,
        company_id=1,
        recorder_id=user_id,
        kind=kind,
        amount=Decimal(str(amount)),
        entry_date=day,
        recorded_at=datetime.combine(day, datetime.min.time()),
        category=category,
        recorder_name=user_name,
    )


def _ledger():
    return [
        _entry(1, EntryKind.IN, 100, date(2024, 1, 1), user_id=1, user_name="Bea", category="Sales"),
        _entry(2, EntryKind.OUT, 40, date(2024, 1, 2), user_id=2, user_name="Al", category="Supplies"),
        _entry(3, EntryKind.IN, 50, date(2024, 1, 8), user_id=1, user_name="Bea", category="Sales"),
        _entry(4, EntryKind.OUT, 15, date(2024, 2, 3), user_id=3, user_name=None, category="  "),
    ]


def test_by_category_collapses_missing_labels():
    entries = [
        _entry(1, EntryKind.IN, 30, date(2024, 1, 1), category=None),
        _entry(2, EntryKind.OUT, 10, date(2024, 1, 1), category="Supplies"),
    ]

    report = compute_by_category(entries)

    assert report.row_dicts() == [
        {"category": "Supplies", "total_in": 0, "total_out": 10, "profit": -10},
        {"category": "Uncategorized", "total_in": 30, "total_out": 0, "profit": 30},
    ]


def test_by_employee_sorted_by_name_with_unknown_fallback():
    report = compute_by_employee(_ledger())
    rows = report.row_dicts()

    assert [r["employee_name"] for r in rows] == ["Al", "Bea", "Unknown"]
    assert rows[1] == {"user_id": 1, "employee_name": "Bea", "total_in": 150, "total_out": 0, "profit": 150}
    assert rows[2]["user_id"] == 3


def test_breakdown_rows_sum_to_totals():
    entries = _ledger()
    for report in (compute_by_employee(entries), compute_by_category(entries)):
        assert sum(r.total_in for r in report.rows) == report.totals.total_in
        assert sum(r.total_out for r in report.rows) == report.totals.total_out
        assert report.holdings == report.totals.net


def test_summary_holdings_daily_and_weekly_ignore_extras():
    extras = [ExtraExpenditure(extra_id=1, company_id=1, expense_date=date(2024, 1, 5), amount=Decimal("20"))]

    for period in (Period.DAILY, Period.WEEKLY):
        report = compute_summary(_ledger(), extras, period)
        assert report.holdings == Decimal("95")
        assert all(b.extra is None for b in report.buckets)


def test_summary_monthly_holdings_is_sum_of_bucket_profits():
    extras = [
        ExtraExpenditure(extra_id=1, company_id=1, expense_date=date(2024, 1, 5), amount=Decimal("20")),
        ExtraExpenditure(extra_id=2, company_id=1, expense_date=date(2024, 2, 9), amount=Decimal("5")),
    ]

    report = compute_summary(_ledger(), extras, "monthly")

    assert [b.key for b in report.buckets] == ["2024-01", "2024-02"]
    assert [b.profit for b in report.buckets] == [Decimal("90"), Decimal("-20")]
    assert report.holdings == Decimal("70")
    assert report.totals.total_in == 150
    assert report.totals.total_out == 55


def test_summary_extras_outside_bucketed_months_do_not_count():
    extras = [ExtraExpenditure(extra_id=1, company_id=1, expense_date=date(2024, 6, 1), amount=Decimal("99"))]

    report = compute_summary(_ledger(), extras, "monthly")

    assert report.holdings == Decimal("95")


def test_summary_defaults_to_daily():
    report = compute_summary(_ledger(), [], None)

    assert report.period == Period.DAILY
    assert report.as_dict()["buckets"][0] == {"date": "2024-01-01", "in": 100, "out": 0, "profit": 100}


def test_summary_rejects_unknown_period():
    with pytest.raises(InvalidPeriod):
        compute_summary(_ledger(), [], "yearly")


def test_summary_is_idempotent():
    entries = _ledger()
    first = compute_summary(entries, [], "weekly", date_range=resolve_range("2024-01-01", "2024-02-29"))
    second = compute_summary(entries, [], "weekly", date_range=resolve_range("2024-01-01", "2024-02-29"))

    assert first == second
    assert first.as_dict()["start"] == "2024-01-01"
    assert first.as_dict()["end"] == "2024-02-29"


def test_fractional_amounts_stay_exact():
    entries = [
        _entry(1, EntryKind.IN, "0.1", date(2024, 1, 1)),
        _entry(2, EntryKind.IN, "0.2", date(2024, 1, 1)),
    ]

    totals = compute_totals(entries)

    assert totals.total_in == Decimal("0.3")
    assert totals.as_dict() == {"in": 0.3, "out": 0}
