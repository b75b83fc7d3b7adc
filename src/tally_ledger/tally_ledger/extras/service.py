from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import DateRange, parse_iso_date
from ..common.validators import optional_text, require_amount
from ..core.constants import MAX_DESCRIPTION_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import ExtraExpenditure
from .repository import ExtraRepository


class ExtraService:
    def __init__(self, extras: ExtraRepository):
        self._extras = extras

    def record(
        self,
        *,
        current_role: Role,
        company_id: int,
        expense_date: object,
        amount: object,
        description: Optional[str] = None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")
        if not expense_date:
            raise ValidationError("date and amount required")

        return self._extras.create_extra(
            company_id=int(company_id),
            expense_date=parse_iso_date(expense_date),
            amount=require_amount(amount),
            description=optional_text(description, "description", MAX_DESCRIPTION_LENGTH),
        )

    def list_extras(self, *, company_id: int, date_range: DateRange) -> Sequence[ExtraExpenditure]:
        return self._extras.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
