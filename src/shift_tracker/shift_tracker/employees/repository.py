from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def find_by_code(self, code: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, national_id: str) -> bool:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        national_id: str,
        code: str,
        hired_at: datetime,
        terminated_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
    ) -> Employee:
        """Persist a new employee.

        Raises ConflictError when the national ID or the code is already taken.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def update(
        self,
        *,
        employee_id: str,
        name: str,
        hired_at: datetime,
        terminated_at: Optional[datetime],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        """Delete the employee; its shift records go with it."""

        raise NotImplementedError
