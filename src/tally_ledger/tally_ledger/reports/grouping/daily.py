from __future__ import annotations

from datetime import date

from ...core.enums import Period
from .base import PeriodGrouping


class DailyGrouping(PeriodGrouping):
    """One bucket per calendar date."""

    period = Period.DAILY

    def key_for(self, day: date) -> str:
        return day.isoformat()
