from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.money import to_number
from ..core.enums import EntryKind


@dataclass(frozen=True)
class Entry:
    """Domain entity: one cash movement recorded by an employee.

    ``amount`` is always a magnitude; ``kind`` carries the direction.
    ``recorder_name`` is resolved by the store (read-model join) and may be absent.
    """

    entry_id: int
    company_id: int
    recorder_id: int
    kind: EntryKind
    amount: Decimal
    entry_date: date
    recorded_at: datetime
    category: Optional[str] = None
    description: Optional[str] = None
    recorder_name: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "company_id": self.company_id,
            "user_id": self.recorder_id,
            "user_name": self.recorder_name,
            "type": self.kind.value,
            "amount": to_number(self.amount),
            "category": self.category,
            "description": self.description,
            "date": self.entry_date.isoformat(),
            "created_at": self.recorded_at.isoformat(),
        }
