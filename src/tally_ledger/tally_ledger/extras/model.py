from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import to_number


@dataclass(frozen=True)
class ExtraExpenditure:
    """Domain entity: a monthly-only deduction not tied to an entry category."""

    extra_id: int
    company_id: int
    expense_date: date
    amount: Decimal
    description: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.extra_id,
            "company_id": self.company_id,
            "date": self.expense_date.isoformat(),
            "amount": to_number(self.amount),
            "description": self.description,
        }
