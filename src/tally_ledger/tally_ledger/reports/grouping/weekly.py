from __future__ import annotations

from datetime import date

from ...common.datetime_utils import week_start
from ...core.enums import Period
from .base import PeriodGrouping


class WeeklyGrouping(PeriodGrouping):
    """One bucket per week; weeks start on Monday and are keyed by that Monday."""

    period = Period.WEEKLY

    def key_for(self, day: date) -> str:
        return week_start(day).isoformat()
