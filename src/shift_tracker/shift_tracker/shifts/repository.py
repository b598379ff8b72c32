from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ShiftRecord


class ShiftStore(Protocol):
    """Repository interface for ShiftRecord.

    Implementations must guarantee at most one open record per
    (employee_id, shift_date) themselves; a concurrent duplicate insert raises
    ConflictError.
    """

    def insert_open(self, *, employee_id: str, shift_date: date, start_time: datetime) -> ShiftRecord:
        raise NotImplementedError

    def close_open(self, *, employee_id: str, shift_date: date, end_time: datetime) -> ShiftRecord:
        """Close the open record; raises NotFoundError when there is none."""

        raise NotImplementedError

    def find_open(self, employee_id: str, shift_date: date) -> Optional[ShiftRecord]:
        raise NotImplementedError

    def find_by_date(self, employee_id: str, shift_date: date) -> Sequence[ShiftRecord]:
        """Records of one day, ascending by start_time."""

        raise NotImplementedError

    def find_since(self, employee_id: str, since: date) -> Sequence[ShiftRecord]:
        """Records with shift_date >= since, ascending by start_time."""

        raise NotImplementedError
