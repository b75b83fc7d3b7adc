from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..core.constants import DEFAULT_RANGE_END, DEFAULT_RANGE_START
from ..core.exceptions import InvalidRange, ValidationError


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


def parse_iso_date(value: object) -> date:
    """Parse a date, tolerating timestamps by keeping only the YYYY-MM-DD prefix."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()[:10]
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def resolve_range(start: Optional[object] = None, end: Optional[object] = None) -> DateRange:
    """Resolve optional request bounds into an inclusive range.

    Missing bounds default to 1900-01-01 .. 2999-12-31.
    """
    s = parse_iso_date(start) if start else DEFAULT_RANGE_START
    e = parse_iso_date(end) if end else DEFAULT_RANGE_END
    if e < s:
        raise InvalidRange(f"end date {e.isoformat()} precedes start date {s.isoformat()}")
    return DateRange(start=s, end=e)


def week_start(value: date) -> date:
    """Monday of the week containing ``value``."""
    return value - timedelta(days=value.weekday())


def month_key(value: date) -> str:
    return value.isoformat()[:7]


def now_utc() -> datetime:
    """Current UTC time as a naive datetime (the store keeps UTC without tzinfo).

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
