from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from ..core.constants import AMOUNT_STEP, MAX_AMOUNT
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str], field_name: str = "email") -> str:
    email = require_non_empty(value, field_name).lower()
    if "@" not in email:
        raise ValidationError(f"{field_name} is not a valid email address")
    return email


def require_amount(value: object, field_name: str = "amount") -> Decimal:
    """Parse a non-negative monetary amount that fits ``DECIMAL(14,2)`` exactly."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if amount >= MAX_AMOUNT:
        raise ValidationError(f"{field_name} must be less than {MAX_AMOUNT:f}")
    if amount.quantize(AMOUNT_STEP) != amount:
        raise ValidationError(f"{field_name} must have at most 2 decimal places")
    return amount


def optional_text(value: Optional[str], field_name: str = "text", max_length: Optional[int] = None) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return text or None
