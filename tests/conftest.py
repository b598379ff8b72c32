from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional

import pytest

from src.shift_tracker.shift_tracker.common.clock import FixedClock
from src.shift_tracker.shift_tracker.core.exceptions import ConflictError, NotFoundError
from src.shift_tracker.shift_tracker.employees.model import Employee
from src.shift_tracker.shift_tracker.shifts.model import ShiftRecord


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[str, Employee] = {}

    def add(self, employee: Employee) -> Employee:
        self.by_id[employee.employee_id] = employee
        return employee

    def find_by_code(self, code: str) -> Optional[Employee]:
        return next((e for e in self.by_id.values() if e.code == code), None)

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def exists(self, national_id: str) -> bool:
        return any(e.national_id == national_id for e in self.by_id.values())

    def create(self, *, name, national_id, code, hired_at, terminated_at=None, created_at=None) -> Employee:
        if self.exists(national_id) or self.find_by_code(code):
            raise ConflictError("employee already registered")
        return self.add(
            Employee(
                employee_id=str(uuid.uuid4()),
                name=name,
                national_id=national_id,
                code=code,
                hired_at=hired_at,
                terminated_at=terminated_at,
                created_at=created_at,
            )
        )

    def list_all(self):
        return list(self.by_id.values())

    def update(self, *, employee_id, name, hired_at, terminated_at) -> bool:
        current = self.by_id.get(employee_id)
        if not current:
            return False
        self.by_id[employee_id] = replace(current, name=name, hired_at=hired_at, terminated_at=terminated_at)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self.by_id.pop(employee_id, None) is not None


class InMemoryShifts:
    """Keeps insertion order; the unique open-shift rule mirrors the MySQL key."""

    def __init__(self):
        self.records: list[ShiftRecord] = []
        self._id = 0

    def add(self, record: ShiftRecord) -> ShiftRecord:
        self.records.append(record)
        return record

    def insert_open(self, *, employee_id: str, shift_date: date, start_time: datetime) -> ShiftRecord:
        if self.find_open(employee_id, shift_date):
            raise ConflictError("duplicate open shift")
        self._id += 1
        return self.add(
            ShiftRecord(
                shift_id=self._id,
                employee_id=employee_id,
                start_time=start_time,
                end_time=None,
                shift_date=shift_date,
                created_at=start_time,
            )
        )

    def close_open(self, *, employee_id: str, shift_date: date, end_time: datetime) -> ShiftRecord:
        for i, r in enumerate(self.records):
            if r.employee_id == employee_id and r.shift_date == shift_date and r.end_time is None:
                self.records[i] = replace(r, end_time=end_time)
                return self.records[i]
        raise NotFoundError("no active shift")

    def find_open(self, employee_id: str, shift_date: date) -> Optional[ShiftRecord]:
        return next(
            (r for r in self.records if r.employee_id == employee_id and r.shift_date == shift_date and r.end_time is None),
            None,
        )

    def find_by_date(self, employee_id: str, shift_date: date):
        items = [r for r in self.records if r.employee_id == employee_id and r.shift_date == shift_date]
        return sorted(items, key=lambda r: r.start_time)

    def find_since(self, employee_id: str, since: date):
        items = [r for r in self.records if r.employee_id == employee_id and r.shift_date >= since]
        return sorted(items, key=lambda r: r.start_time)

    def open_count(self, employee_id: str, shift_date: date) -> int:
        return sum(1 for r in self.records if r.employee_id == employee_id and r.shift_date == shift_date and r.end_time is None)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return utc(2025, 1, 6, 9, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def shifts_repo() -> InMemoryShifts:
    return InMemoryShifts()


@pytest.fixture
def employee(employees_repo) -> Employee:
    return employees_repo.add(
        Employee(
            employee_id="emp-1",
            name="John Doe",
            national_id="52998224725",
            code="EMP123",
            hired_at=utc(2024, 1, 1),
        )
    )


class ScriptedCursor:
    def __init__(self, db: "ScriptedDatabase"):
        self._db = db
        self._rows: list[dict] = []
        self.rowcount = 0
        self.lastrowid = None

    def execute(self, sql: str, params=()):
        self._db.executed.append((" ".join(sql.split()), tuple(params)))
        step = self._db.steps.pop(0) if self._db.steps else {}
        if isinstance(step, Exception):
            raise step
        self._rows = list(step.get("rows", []))
        self.rowcount = step.get("rowcount", len(self._rows))
        self.lastrowid = step.get("lastrowid")

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self):
        pass


class ScriptedConnection:
    def __init__(self, db: "ScriptedDatabase"):
        self._db = db

    def cursor(self, dictionary: bool = True):
        return ScriptedCursor(self._db)

    def commit(self):
        self._db.commits += 1

    def rollback(self):
        self._db.rollbacks += 1

    def close(self):
        pass


class ScriptedDatabase:
    """Stands in for DatabaseConnection; each execute() consumes one step.

    A step is an exception to raise or a dict with rows / rowcount / lastrowid.
    """

    def __init__(self, *steps):
        self.steps = list(steps)
        self.executed: list[tuple[str, tuple]] = []
        self.commits = 0
        self.rollbacks = 0

    def connect(self):
        return ScriptedConnection(self)


@pytest.fixture
def scripted_db():
    return ScriptedDatabase
