from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

ZERO = Decimal("0")


def as_amount(value: object) -> Decimal:
    """Coerce a stored amount into a Decimal.

    Reporting is fail-open: missing or unreadable amounts count as zero.
    Floats go through ``str`` so 0.1 stays 0.1 instead of its binary expansion.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return ZERO
    return amount if amount.is_finite() else ZERO


def to_number(value: Optional[Decimal]) -> float | int:
    """Render a Decimal for JSON output."""
    if value is None:
        return 0
    if value == value.to_integral_value():
        return int(value)
    return float(value)
