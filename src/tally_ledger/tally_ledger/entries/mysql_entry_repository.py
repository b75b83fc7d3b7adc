from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import as_amount
from ..core.enums import EntryKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_datetime
from .model import Entry
from .repository import EntryRepository


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_entry(
        self,
        *,
        company_id: int,
        recorder_id: int,
        kind: EntryKind,
        amount: Decimal,
        entry_date: date,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO entries(company_id, user_id, kind, amount, category, description, entry_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(company_id), int(recorder_id), kind.value, amount, category, description, entry_date),
            )
            return int(cur.lastrowid)

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.entry_id, e.company_id, e.user_id, e.kind, e.amount, e.category,
                       e.description, e.entry_date, e.created_at,
                       u.name AS user_name
                FROM entries e
                LEFT JOIN users u ON u.user_id = e.user_id
                WHERE e.company_id=%s AND e.entry_date BETWEEN %s AND %s
                ORDER BY e.entry_date ASC, e.created_at ASC, e.entry_id ASC
                """,
                (int(company_id), start, end),
            )
            rows = fetchall(cur)

            return [
                Entry(
                    entry_id=int(r["entry_id"]),
                    company_id=int(r["company_id"]),
                    recorder_id=int(r["user_id"]),
                    kind=EntryKind(r["kind"]),
                    amount=as_amount(r.get("amount")),
                    entry_date=normalize_mysql_date(r["entry_date"]),
                    recorded_at=normalize_mysql_datetime(r["created_at"]),
                    category=r.get("category"),
                    description=r.get("description"),
                    recorder_name=r.get("user_name"),
                )
                for r in rows
            ]
