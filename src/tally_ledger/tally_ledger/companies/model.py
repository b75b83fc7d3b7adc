from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Company:
    """Domain entity: a tenant. Every other record is scoped to exactly one company."""

    company_id: int
    name: str
    email: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
