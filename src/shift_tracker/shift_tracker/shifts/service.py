from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.clock import Clock, SystemClock
from ..common.logging_utils import get_logger
from ..core.constants import DEFAULT_HISTORY_SINCE
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeDirectory
from .duration import duration_ms, format_duration, total_worked
from .model import HistoryEntry, ShiftRecord, TodayHours
from .repository import ShiftStore

logger = get_logger("shifts.service")


class ShiftService:
    """Use case: daily shift lifecycle (NoShift -> Active -> Closed) keyed by employee code."""

    def __init__(
        self,
        shifts: ShiftStore,
        employees: EmployeeDirectory,
        *,
        clock: Optional[Clock] = None,
        history_since: date = DEFAULT_HISTORY_SINCE,
    ):
        self._shifts = shifts
        self._employees = employees
        self._clock = clock or SystemClock()
        self._history_since = history_since

    def _resolve(self, code: str) -> Employee:
        employee = self._employees.find_by_code(code)
        if not employee:
            raise NotFoundError("employee not found")
        return employee

    def start(self, code: str) -> ShiftRecord:
        employee = self._resolve(code)
        now = self._clock.now()
        today = now.date()

        if self._shifts.find_open(employee.employee_id, today):
            logger.warning("start rejected for %s: shift already started", code)
            raise ConflictError("shift already started")

        # The store's unique key still settles concurrent starts.
        try:
            record = self._shifts.insert_open(employee_id=employee.employee_id, shift_date=today, start_time=now)
        except ConflictError:
            logger.warning("start rejected for %s: concurrent open shift", code)
            raise ConflictError("shift already started") from None

        logger.info("shift %s started for %s at %s", record.shift_id, code, now.isoformat())
        return record

    def end(self, code: str) -> ShiftRecord:
        employee = self._resolve(code)
        now = self._clock.now()

        try:
            record = self._shifts.close_open(employee_id=employee.employee_id, shift_date=now.date(), end_time=now)
        except NotFoundError:
            logger.warning("end rejected for %s: no active shift", code)
            raise ConflictError("no active shift") from None

        logger.info("shift %s ended for %s at %s", record.shift_id, code, now.isoformat())
        return record

    def hours_today(self, code: str) -> TodayHours:
        employee = self._resolve(code)
        records = self._shifts.find_by_date(employee.employee_id, self._clock.now().date())
        if not records:
            raise NotFoundError("no shift today")

        first_start = min(r.start_time for r in records)
        if any(r.is_open for r in records):
            last_end = None
        else:
            last_end = max(r.end_time for r in records)

        worked = format_duration(duration_ms(first_start, last_end, self._clock))
        return TodayHours(start_time=first_start, end_time=last_end, worked_hours=worked)

    def total_today(self, code: str) -> str:
        """Sum of today's individual shifts, gaps between them excluded."""

        employee = self._resolve(code)
        records = self._shifts.find_by_date(employee.employee_id, self._clock.now().date())
        if not records:
            raise NotFoundError("no shift today")
        return total_worked(records, self._clock)

    def hours_history(self, code: str) -> list[HistoryEntry]:
        employee = self._resolve(code)
        today = self._clock.now().date()
        records = [r for r in self._shifts.find_since(employee.employee_id, self._history_since) if r.shift_date <= today]
        if not records:
            raise NotFoundError("no past shifts")

        return [
            HistoryEntry(
                date=r.shift_date,
                start_time=r.start_time,
                end_time=r.end_time,
                worked_hours=r.worked_hours(self._clock),
            )
            for r in records
        ]
