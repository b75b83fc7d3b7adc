from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime
from .model import Shift
from .repository import ShiftRepository


def _to_shift(r: Dict[str, Any]) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        company_id=int(r["company_id"]),
        recorder_id=int(r["user_id"]),
        clock_in=normalize_mysql_datetime(r["clock_in"]),
        clock_out=normalize_mysql_datetime(r.get("clock_out")),
        recorder_name=r.get("user_name"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_for_user(self, *, company_id: int, user_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, company_id, user_id, clock_in, clock_out
                FROM shifts
                WHERE company_id=%s AND user_id=%s AND clock_out IS NULL
                ORDER BY clock_in DESC
                LIMIT 1
                """,
                (int(company_id), int(user_id)),
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def open_shift(self, *, company_id: int, user_id: int, clock_in: datetime) -> Optional[int]:
        # Single statement: the existence check and the insert cannot interleave with another writer.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(company_id, user_id, clock_in)
                SELECT %s, %s, %s FROM DUAL
                WHERE NOT EXISTS (
                    SELECT 1 FROM shifts
                    WHERE company_id=%s AND user_id=%s AND clock_out IS NULL
                )
                """,
                (int(company_id), int(user_id), clock_in, int(company_id), int(user_id)),
            )
            if cur.rowcount == 0:
                return None
            return int(cur.lastrowid)

    def close_shift(self, *, company_id: int, shift_id: int, clock_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET clock_out=%s
                WHERE shift_id=%s AND company_id=%s AND clock_out IS NULL
                """,
                (clock_out, int(shift_id), int(company_id)),
            )
            return cur.rowcount > 0

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.shift_id, s.company_id, s.user_id, s.clock_in, s.clock_out,
                       u.name AS user_name
                FROM shifts s
                LEFT JOIN users u ON u.user_id = s.user_id
                WHERE s.company_id=%s AND DATE(s.clock_in) BETWEEN %s AND %s
                ORDER BY s.clock_in DESC, s.shift_id DESC
                """,
                (int(company_id), start, end),
            )
            return [_to_shift(r) for r in fetchall(cur)]
