from __future__ import annotations

from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Company
from .repository import CompanyRepository


def _to_company(r: Dict[str, Any]) -> Company:
    return Company(
        company_id=int(r["company_id"]),
        name=r["name"],
        email=r["email"],
        phone=r.get("phone"),
        created_at=r.get("created_at"),
    )


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, company_id: int) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT company_id, name, email, phone, created_at FROM companies WHERE company_id=%s",
                (int(company_id),),
            )
            r = fetchone(cur)
            return _to_company(r) if r else None

    def get_by_name(self, name: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT company_id, name, email, phone, created_at FROM companies WHERE name=%s",
                (name,),
            )
            r = fetchone(cur)
            return _to_company(r) if r else None

    def create_company(self, *, name: str, email: str, phone: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO companies(name, email, phone) VALUES(%s,%s,%s)",
                (name, email, phone),
            )
            return int(cur.lastrowid)
