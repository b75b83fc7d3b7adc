"""Bucketing engine: group entries into daily/weekly/monthly buckets.

All functions are pure: they read value snapshots and return new tuples.
"""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Sequence

from ..common.datetime_utils import month_key
from ..common.money import ZERO, as_amount
from ..core.enums import EntryKind
from ..entries.model import Entry
from ..extras.model import ExtraExpenditure
from .grouping.base import PeriodGrouping
from .model import Bucket


def bucket_entries(entries: Iterable[Entry], grouping: PeriodGrouping) -> tuple[Bucket, ...]:
    """Sum IN and OUT amounts per bucket key; buckets come back sorted by key.

    Sparse: periods without entries produce no bucket.
    """
    sums: dict[str, list[Decimal]] = {}
    for e in entries:
        acc = sums.setdefault(grouping.key_for(e.entry_date), [ZERO, ZERO])
        if e.kind == EntryKind.IN:
            acc[0] += as_amount(e.amount)
        elif e.kind == EntryKind.OUT:
            acc[1] += as_amount(e.amount)

    return tuple(
        Bucket(key=key, total_in=total_in, total_out=total_out, profit=total_in - total_out)
        for key, (total_in, total_out) in sorted(sums.items())
    )


def extras_by_month(extras: Iterable[ExtraExpenditure]) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = {}
    for x in extras:
        key = month_key(x.expense_date)
        totals[key] = totals.get(key, ZERO) + as_amount(x.amount)
    return totals


def apply_extras(buckets: Sequence[Bucket], extras: Iterable[ExtraExpenditure]) -> tuple[Bucket, ...]:
    """Deduct each month's extra expenditures from its monthly bucket.

    Only meaningful for monthly buckets; callers must not apply it to daily/weekly ones.
    """
    by_month = extras_by_month(extras)
    adjusted = []
    for b in buckets:
        extra = by_month.get(b.key, ZERO)
        adjusted.append(replace(b, extra=extra, profit=b.profit - extra))
    return tuple(adjusted)
