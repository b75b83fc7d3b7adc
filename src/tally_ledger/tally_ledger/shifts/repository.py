from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_open_for_user(self, *, company_id: int, user_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def open_shift(self, *, company_id: int, user_id: int, clock_in: datetime) -> Optional[int]:
        """Insert a shift only if the user has none open.

        Returns the new shift id, or None when an open shift already exists.
        """

        raise NotImplementedError

    def close_shift(self, *, company_id: int, shift_id: int, clock_out: datetime) -> bool:
        """Set clock_out once. Returns False if the shift was already closed."""

        raise NotImplementedError

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[Shift]:
        """Shifts whose clock-in date falls within [start, end], with recorder names."""

        raise NotImplementedError
