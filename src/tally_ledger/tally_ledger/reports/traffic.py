from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import DateRange
from ..shifts.model import Shift
from .model import TrafficReport, TrafficRow


def compute_traffic(shifts: Iterable[Shift], *, date_range: Optional[DateRange] = None) -> TrafficReport:
    """Per clock-in day: number of shifts started and hours worked by closed shifts.

    Open shifts are counted but add 0 hours. Rows ascend by day.
    """
    per_day: dict[date, list] = {}
    for s in shifts:
        acc = per_day.setdefault(s.clock_in.date(), [0, 0.0])
        acc[0] += 1
        acc[1] += s.worked_seconds()

    rows = tuple(
        TrafficRow(day=day, shift_count=count, hours=seconds / 3600)
        for day, (count, seconds) in sorted(per_day.items())
    )
    return TrafficReport(
        rows=rows,
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
    )
