from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Period
from .grouping.base import PeriodGrouping
from .grouping.daily import DailyGrouping
from .grouping.monthly import MonthlyGrouping
from .grouping.weekly import WeeklyGrouping


@dataclass
class PeriodGroupingFactory:
    """Factory Pattern: choose the grouping strategy for a report period."""

    def for_period(self, period: Period | str | None) -> PeriodGrouping:
        if not isinstance(period, Period):
            period = Period.parse(period)

        if period == Period.WEEKLY:
            return WeeklyGrouping()
        if period == Period.MONTHLY:
            return MonthlyGrouping()
        return DailyGrouping()
