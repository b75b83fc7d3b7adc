from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from typing import Iterator, Optional, Sequence

from ..common.datetime_utils import DateRange, now_utc
from ..core.exceptions import AlreadyOpenShift, NoOpenShift
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Use case: clock in/out and list shifts.

    Clock transitions are serialized per (company, user) with an in-process lock,
    and the repository applies them as conditional writes, so two racing
    requests from the same recorder cannot both open (or both close) a shift.
    """

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts
        # key -> [lock, number of callers holding or waiting on it]
        self._locks: dict[tuple[int, int], list] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _serialized(self, company_id: int, user_id: int) -> Iterator[None]:
        """Hold the (company, user) lock; the entry is dropped once no caller uses it."""
        key = (int(company_id), int(user_id))
        with self._locks_guard:
            slot = self._locks.get(key)
            if slot is None:
                slot = self._locks[key] = [threading.Lock(), 0]
            slot[1] += 1

        try:
            with slot[0]:
                yield
        finally:
            with self._locks_guard:
                slot[1] -= 1
                if slot[1] == 0:
                    del self._locks[key]

    def clock_in(
        self,
        *,
        company_id: int,
        user_id: int,
        user_name: Optional[str] = None,
        now: datetime | None = None,
    ) -> Shift:
        now = now or now_utc()

        with self._serialized(company_id, user_id):
            if self._shifts.get_open_for_user(company_id=company_id, user_id=user_id):
                raise AlreadyOpenShift("Already clocked in")

            shift_id = self._shifts.open_shift(company_id=company_id, user_id=user_id, clock_in=now)
            if shift_id is None:
                raise AlreadyOpenShift("Already clocked in")

        logger.info("[notify] %s clocked in at %s", user_name or f"user {user_id}", now.isoformat())
        return Shift(
            shift_id=shift_id,
            company_id=int(company_id),
            recorder_id=int(user_id),
            clock_in=now,
            recorder_name=user_name,
        )

    def clock_out(
        self,
        *,
        company_id: int,
        user_id: int,
        now: datetime | None = None,
    ) -> Shift:
        now = now or now_utc()

        with self._serialized(company_id, user_id):
            open_shift = self._shifts.get_open_for_user(company_id=company_id, user_id=user_id)
            if not open_shift:
                raise NoOpenShift("No open shift")

            if not self._shifts.close_shift(company_id=company_id, shift_id=open_shift.shift_id, clock_out=now):
                raise NoOpenShift("No open shift")

        logger.info("User %s clocked out of shift %s at %s", user_id, open_shift.shift_id, now.isoformat())
        return replace(open_shift, clock_out=now)

    def list_shifts(self, *, company_id: int, date_range: DateRange) -> Sequence[Shift]:
        """Shifts starting in range, newest clock-in first."""

        rows = self._shifts.list_range(company_id=int(company_id), start=date_range.start, end=date_range.end)
        return sorted(rows, key=lambda s: (s.clock_in, s.shift_id), reverse=True)
