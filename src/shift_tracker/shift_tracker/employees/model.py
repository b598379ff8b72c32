from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee who clocks shifts with a short code.

    Note: plain data object, no DB access code here.
    """

    employee_id: str
    name: str
    national_id: str
    code: str
    hired_at: datetime
    terminated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.terminated_at is None
