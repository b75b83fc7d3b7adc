from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import as_amount
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import ExtraExpenditure
from .repository import ExtraRepository


class MySQLExtraRepository(ExtraRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_extra(
        self,
        *,
        company_id: int,
        expense_date: date,
        amount: Decimal,
        description: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO extra_expenditures(company_id, expense_date, amount, description)
                VALUES(%s,%s,%s,%s)
                """,
                (int(company_id), expense_date, amount, description),
            )
            return int(cur.lastrowid)

    def list_range(self, *, company_id: int, start: date, end: date) -> Sequence[ExtraExpenditure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT extra_id, company_id, expense_date, amount, description
                FROM extra_expenditures
                WHERE company_id=%s AND expense_date BETWEEN %s AND %s
                ORDER BY expense_date ASC, extra_id ASC
                """,
                (int(company_id), start, end),
            )
            return [
                ExtraExpenditure(
                    extra_id=int(r["extra_id"]),
                    company_id=int(r["company_id"]),
                    expense_date=normalize_mysql_date(r["expense_date"]),
                    amount=as_amount(r.get("amount")),
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]
