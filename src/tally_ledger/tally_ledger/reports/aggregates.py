"""Aggregate report builder: summary, by-employee and by-category views."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence, Union

from ..common.datetime_utils import DateRange
from ..common.money import ZERO, as_amount
from ..core.constants import UNCATEGORIZED, UNKNOWN_RECORDER
from ..core.enums import EntryKind, Period
from ..entries.model import Entry
from ..extras.model import ExtraExpenditure
from .bucketing import apply_extras, bucket_entries
from .factory import PeriodGroupingFactory
from .model import BreakdownReport, BreakdownRow, SummaryReport, Totals

logger = logging.getLogger(__name__)

_FACTORY = PeriodGroupingFactory()


def compute_totals(entries: Iterable[Entry]) -> Totals:
    total_in = ZERO
    total_out = ZERO
    for e in entries:
        if e.kind == EntryKind.IN:
            total_in += as_amount(e.amount)
        elif e.kind == EntryKind.OUT:
            total_out += as_amount(e.amount)
    return Totals(total_in=total_in, total_out=total_out)


def compute_summary(
    entries: Sequence[Entry],
    extras: Sequence[ExtraExpenditure],
    period: Period | str | None,
    *,
    date_range: Optional[DateRange] = None,
) -> SummaryReport:
    """Bucket ``entries`` by period and compute range totals and holdings.

    Monthly buckets carry the month's extra expenditures and their profit is
    reduced by them; holdings for a monthly report is the sum of bucket
    profits. Daily and weekly reports ignore extras entirely.
    """
    grouping = _FACTORY.for_period(period)
    totals = compute_totals(entries)
    buckets = bucket_entries(entries, grouping)

    if grouping.period == Period.MONTHLY:
        buckets = apply_extras(buckets, extras)
        holdings = sum((b.profit for b in buckets), ZERO)
    else:
        holdings = totals.net

    logger.debug("Summary (%s): %d entries -> %d buckets", grouping.period.value, len(entries), len(buckets))
    return SummaryReport(
        period=grouping.period,
        totals=totals,
        holdings=holdings,
        buckets=buckets,
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
    )


def _category_label(entry: Entry) -> str:
    label = (entry.category or "").strip()
    return label or UNCATEGORIZED


def _breakdown(
    entries: Iterable[Entry],
    *,
    key_of: Callable[[Entry], Union[int, str]],
    label_of: Callable[[Entry], str],
) -> tuple[BreakdownRow, ...]:
    groups: dict[Union[int, str], list] = {}
    for e in entries:
        key = key_of(e)
        acc = groups.get(key)
        if acc is None:
            acc = groups[key] = [label_of(e), ZERO, ZERO]
        if e.kind == EntryKind.IN:
            acc[1] += as_amount(e.amount)
        elif e.kind == EntryKind.OUT:
            acc[2] += as_amount(e.amount)

    rows = [
        BreakdownRow(key=key, label=label, total_in=total_in, total_out=total_out)
        for key, (label, total_in, total_out) in groups.items()
    ]
    rows.sort(key=lambda r: (r.label, r.key))
    return tuple(rows)


def compute_by_employee(entries: Sequence[Entry], *, date_range: Optional[DateRange] = None) -> BreakdownReport:
    """One row per recorder with entries in range, sorted by display name."""
    rows = _breakdown(
        entries,
        key_of=lambda e: e.recorder_id,
        label_of=lambda e: e.recorder_name or UNKNOWN_RECORDER,
    )
    return BreakdownReport(
        dimension="employee",
        totals=compute_totals(entries),
        rows=rows,
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
    )


def compute_by_category(entries: Sequence[Entry], *, date_range: Optional[DateRange] = None) -> BreakdownReport:
    """One row per category label; missing categories collapse into "Uncategorized"."""
    rows = _breakdown(entries, key_of=_category_label, label_of=_category_label)
    return BreakdownReport(
        dimension="category",
        totals=compute_totals(entries),
        rows=rows,
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
    )
