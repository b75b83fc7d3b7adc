from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import DateRange, parse_iso_date
from ..common.validators import optional_text, require_amount
from ..core.constants import MAX_CATEGORY_LENGTH, MAX_DESCRIPTION_LENGTH
from ..core.enums import EntryKind
from ..core.exceptions import ValidationError
from .model import Entry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Use case: record cash entries and list them for a tenant."""

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def record(
        self,
        *,
        company_id: int,
        user_id: int,
        kind: object,
        amount: object,
        entry_date: object,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        if not kind or amount is None or amount == "" or not entry_date:
            raise ValidationError("type, amount, date required")

        entry_kind = EntryKind.parse(kind)
        value = require_amount(amount)
        day = parse_iso_date(entry_date)

        entry_id = self._entries.create_entry(
            company_id=int(company_id),
            recorder_id=int(user_id),
            kind=entry_kind,
            amount=value,
            entry_date=day,
            category=optional_text(category, "category", MAX_CATEGORY_LENGTH),
            description=optional_text(description, "description", MAX_DESCRIPTION_LENGTH),
        )
        logger.debug("Entry %s recorded: company=%s %s %s on %s", entry_id, company_id, entry_kind.value, value, day)
        return entry_id

    def list_entries(self, *, company_id: int, date_range: DateRange) -> Sequence[Entry]:
        """Entries in range, newest first (date desc, then recorded_at desc)."""

        rows = self._entries.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return sorted(rows, key=lambda e: (e.entry_date, e.recorded_at, e.entry_id), reverse=True)
