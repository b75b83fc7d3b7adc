from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.tally_ledger.tally_ledger.common.datetime_utils import resolve_range
from src.tally_ledger.tally_ledger.core.exceptions import AlreadyOpenShift, NoOpenShift
from src.tally_ledger.tally_ledger.shifts.model import Shift
from src.tally_ledger.tally_ledger.shifts.service import ShiftService


class InMemoryShifts:
    """Mirrors the conditional writes of the MySQL repository."""

    def __init__(self):
        self._rows: dict[int, Shift] = {}
        self._id = 0
        self._guard = threading.Lock()

    def get_open_for_user(self, *, company_id: int, user_id: int) -> Optional[Shift]:
        for s in self._rows.values():
            if s.company_id == company_id and s.recorder_id == user_id and s.is_open:
                return s
        return None

    def open_shift(self, *, company_id: int, user_id: int, clock_in: datetime) -> Optional[int]:
        with self._guard:
            if self.get_open_for_user(company_id=company_id, user_id=user_id):
                return None
            self._id += 1
            self._rows[self._id] = Shift(shift_id=self._id, company_id=company_id, recorder_id=user_id, clock_in=clock_in)
            return self._id

    def close_shift(self, *, company_id: int, shift_id: int, clock_out: datetime) -> bool:
        with self._guard:
            s = self._rows.get(shift_id)
            if not s or s.company_id != company_id or not s.is_open:
                return False
            self._rows[shift_id] = replace(s, clock_out=clock_out)
            return True

    def list_range(self, *, company_id: int, start: date, end: date):
        return [s for s in self._rows.values() if s.company_id == company_id and start <= s.clock_in.date() <= end]

    def open_count(self, company_id: int, user_id: int) -> int:
        return sum(1 for s in self._rows.values() if s.company_id == company_id and s.recorder_id == user_id and s.is_open)


class SlowCheckShifts(InMemoryShifts):
    """Widens the check-then-act window so racing clock-ins overlap."""

    def __init__(self, barrier: threading.Barrier):
        super().__init__()
        self._barrier = barrier

    def get_open_for_user(self, *, company_id: int, user_id: int) -> Optional[Shift]:
        found = super().get_open_for_user(company_id=company_id, user_id=user_id)
        try:
            self._barrier.wait(timeout=0.2)
        except threading.BrokenBarrierError:
            pass
        return found


def test_clock_in_then_out(fixed_now):
    repo = InMemoryShifts()
    svc = ShiftService(repo)

    opened = svc.clock_in(company_id=1, user_id=7, user_name="Ana", now=fixed_now)
    closed = svc.clock_out(company_id=1, user_id=7, now=fixed_now + timedelta(hours=8))

    assert opened.shift_id == closed.shift_id
    assert opened.is_open
    assert closed.worked_seconds() == 8 * 3600
    assert repo.open_count(1, 7) == 0


def test_second_clock_in_fails(fixed_now):
    svc = ShiftService(InMemoryShifts())
    svc.clock_in(company_id=1, user_id=7, now=fixed_now)

    with pytest.raises(AlreadyOpenShift):
        svc.clock_in(company_id=1, user_id=7, now=fixed_now + timedelta(minutes=1))


def test_clock_out_without_open_shift_fails(fixed_now):
    svc = ShiftService(InMemoryShifts())

    with pytest.raises(NoOpenShift):
        svc.clock_out(company_id=1, user_id=7, now=fixed_now)


def test_open_shift_is_scoped_per_company(fixed_now):
    repo = InMemoryShifts()
    svc = ShiftService(repo)

    svc.clock_in(company_id=1, user_id=7, now=fixed_now)
    svc.clock_in(company_id=2, user_id=7, now=fixed_now)

    assert repo.open_count(1, 7) == 1
    assert repo.open_count(2, 7) == 1
    with pytest.raises(NoOpenShift):
        svc.clock_out(company_id=3, user_id=7, now=fixed_now)


def test_concurrent_clock_ins_open_exactly_one_shift(fixed_now):
    workers = 4
    repo = SlowCheckShifts(threading.Barrier(workers))
    svc = ShiftService(repo)
    results: list[str] = []
    results_guard = threading.Lock()

    def attempt():
        try:
            svc.clock_in(company_id=1, user_id=7, now=fixed_now)
            outcome = "ok"
        except AlreadyOpenShift:
            outcome = "rejected"
        with results_guard:
            results.append(outcome)

    threads = [threading.Thread(target=attempt) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("rejected") == workers - 1
    assert repo.open_count(1, 7) == 1
    assert svc._locks == {}


def test_list_shifts_newest_first(fixed_now):
    repo = InMemoryShifts()
    svc = ShiftService(repo)
    svc.clock_in(company_id=1, user_id=1, now=fixed_now)
    svc.clock_in(company_id=1, user_id=2, now=fixed_now + timedelta(hours=1))
    svc.clock_in(company_id=1, user_id=3, now=fixed_now - timedelta(days=30))

    shifts = svc.list_shifts(company_id=1, date_range=resolve_range("2024-01-01", "2024-01-31"))

    assert [s.recorder_id for s in shifts] == [2, 1]


def test_lock_registry_is_released_after_transitions(fixed_now):
    svc = ShiftService(InMemoryShifts())

    svc.clock_in(company_id=1, user_id=7, now=fixed_now)
    with pytest.raises(AlreadyOpenShift):
        svc.clock_in(company_id=1, user_id=7, now=fixed_now)
    svc.clock_out(company_id=1, user_id=7, now=fixed_now + timedelta(hours=1))
    with pytest.raises(NoOpenShift):
        svc.clock_out(company_id=2, user_id=7, now=fixed_now)

    assert svc._locks == {}
