from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: one clock-in/clock-out pair. ``clock_out`` is None while the shift is open."""

    shift_id: int
    company_id: int
    recorder_id: int
    clock_in: datetime
    clock_out: Optional[datetime] = None
    recorder_name: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def worked_seconds(self) -> float:
        """Elapsed seconds for a closed shift; open shifts count as 0."""
        if self.clock_out is None:
            return 0.0
        return (self.clock_out - self.clock_in).total_seconds()

    def as_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "company_id": self.company_id,
            "user_id": self.recorder_id,
            "user_name": self.recorder_name,
            "clock_in": self.clock_in.isoformat(),
            "clock_out": self.clock_out.isoformat() if self.clock_out else None,
        }
