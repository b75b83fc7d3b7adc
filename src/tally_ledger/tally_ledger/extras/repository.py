from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import ExtraExpenditure


class ExtraRepository(Protocol):
    def create_extra(
        self,
        *,
        company_id: int,
        expense_date: date,
        amount: Decimal,
        description: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[ExtraExpenditure]:
        """Extras dated within [start, end], ascending by date."""

        raise NotImplementedError
