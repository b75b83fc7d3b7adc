from __future__ import annotations

from enum import Enum
from typing import Optional

from .exceptions import InvalidPeriod, ValidationError


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class EntryKind(str, Enum):
    """Direction of a cash entry. Amounts are magnitudes; the kind gives the sign."""

    IN = "IN"
    OUT = "OUT"

    @classmethod
    def parse(cls, value: object) -> "EntryKind":
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError("type must be IN or OUT")


class Period(str, Enum):
    """Bucket width for summary reports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Period":
        # Unspecified period falls back to daily buckets.
        if value is None or not str(value).strip():
            return cls.DAILY
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidPeriod(f"period must be one of daily, weekly, monthly (got {value!r})")
