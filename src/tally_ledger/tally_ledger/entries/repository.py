from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import EntryKind
from .model import Entry


class EntryRepository(Protocol):
    def create_entry(
        self,
        *,
        company_id: int,
        recorder_id: int,
        kind: EntryKind,
        amount: Decimal,
        entry_date: date,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[Entry]:
        """Entries dated within [start, end], ascending by date, then recorded_at, then id."""

        raise NotImplementedError
