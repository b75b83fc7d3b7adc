from __future__ import annotations

from ..common.datetime_utils import DateRange
from ..core.enums import Period
from ..entries.repository import EntryRepository
from ..extras.repository import ExtraRepository
from ..shifts.repository import ShiftRepository
from .aggregates import compute_by_category, compute_by_employee, compute_summary
from .model import BreakdownReport, SummaryReport, TrafficReport
from .traffic import compute_traffic


class ReportService:
    """Fetch a tenant's rows once per request and hand them to the pure report builders."""

    def __init__(self, entries: EntryRepository, extras: ExtraRepository, shifts: ShiftRepository):
        self._entries = entries
        self._extras = extras
        self._shifts = shifts

    def summary(self, *, company_id: int, date_range: DateRange, period: Period | str | None) -> SummaryReport:
        # Reject a bad period before touching the store.
        period = period if isinstance(period, Period) else Period.parse(period)

        entries = self._entries.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        extras = ()
        if period == Period.MONTHLY:
            extras = self._extras.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return compute_summary(list(entries), list(extras), period, date_range=date_range)

    def by_employee(self, *, company_id: int, date_range: DateRange) -> BreakdownReport:
        entries = self._entries.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return compute_by_employee(list(entries), date_range=date_range)

    def by_category(self, *, company_id: int, date_range: DateRange) -> BreakdownReport:
        entries = self._entries.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return compute_by_category(list(entries), date_range=date_range)

    def traffic(self, *, company_id: int, date_range: DateRange) -> TrafficReport:
        shifts = self._shifts.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return compute_traffic(list(shifts), date_range=date_range)
