from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from ..common.money import ZERO, to_number
from ..core.enums import Period

# JSON key under which each period exposes its bucket key.
BUCKET_KEY_FIELDS = {
    Period.DAILY: "date",
    Period.WEEKLY: "week_start",
    Period.MONTHLY: "month",
}


@dataclass(frozen=True)
class Bucket:
    """Time-windowed aggregation of entries. ``extra`` is set only for monthly buckets."""

    key: str
    total_in: Decimal
    total_out: Decimal
    profit: Decimal
    extra: Optional[Decimal] = None

    def as_dict(self, period: Period) -> dict:
        out = {
            BUCKET_KEY_FIELDS[period]: self.key,
            "in": to_number(self.total_in),
            "out": to_number(self.total_out),
            "profit": to_number(self.profit),
        }
        if self.extra is not None:
            out["extra"] = to_number(self.extra)
        return out


@dataclass(frozen=True)
class Totals:
    total_in: Decimal = ZERO
    total_out: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.total_in - self.total_out

    def as_dict(self) -> dict:
        return {"in": to_number(self.total_in), "out": to_number(self.total_out)}


def _range_dict(start: Optional[date], end: Optional[date]) -> dict:
    return {
        "start": start.isoformat() if start else None,
        "end": end.isoformat() if end else None,
    }


@dataclass(frozen=True)
class SummaryReport:
    period: Period
    totals: Totals
    holdings: Decimal
    buckets: tuple[Bucket, ...]
    start: Optional[date] = None
    end: Optional[date] = None

    def as_dict(self) -> dict:
        return {
            **_range_dict(self.start, self.end),
            "period": self.period.value,
            "totals": self.totals.as_dict(),
            "holdings": to_number(self.holdings),
            "buckets": [b.as_dict(self.period) for b in self.buckets],
        }


@dataclass(frozen=True)
class BreakdownRow:
    key: Union[int, str]
    label: str
    total_in: Decimal
    total_out: Decimal

    @property
    def profit(self) -> Decimal:
        return self.total_in - self.total_out


@dataclass(frozen=True)
class BreakdownReport:
    """By-employee or by-category view. ``dimension`` is "employee" or "category"."""

    dimension: str
    totals: Totals
    rows: tuple[BreakdownRow, ...]
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def holdings(self) -> Decimal:
        # Breakdown views never consider extras.
        return self.totals.net

    def row_dicts(self) -> list[dict]:
        out = []
        for r in self.rows:
            if self.dimension == "employee":
                head = {"user_id": r.key, "employee_name": r.label}
            else:
                head = {"category": r.label}
            out.append(
                {
                    **head,
                    "total_in": to_number(r.total_in),
                    "total_out": to_number(r.total_out),
                    "profit": to_number(r.profit),
                }
            )
        return out

    def as_dict(self) -> dict:
        return {
            **_range_dict(self.start, self.end),
            "totals": self.totals.as_dict(),
            "holdings": to_number(self.holdings),
            "rows": self.row_dicts(),
        }


@dataclass(frozen=True)
class TrafficRow:
    day: date
    shift_count: int
    hours: float

    def as_dict(self) -> dict:
        return {"day": self.day.isoformat(), "shift_count": self.shift_count, "hours": self.hours}


@dataclass(frozen=True)
class TrafficReport:
    rows: tuple[TrafficRow, ...]
    start: Optional[date] = None
    end: Optional[date] = None

    def as_dict(self) -> dict:
        return {**_range_dict(self.start, self.end), "rows": [r.as_dict() for r in self.rows]}
