from __future__ import annotations

from datetime import date

from ...common.datetime_utils import month_key
from ...core.enums import Period
from .base import PeriodGrouping


class MonthlyGrouping(PeriodGrouping):
    """One bucket per calendar month, keyed YYYY-MM."""

    period = Period.MONTHLY

    def key_for(self, day: date) -> str:
        return month_key(day)
