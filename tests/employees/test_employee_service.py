from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.shift_tracker.shift_tracker.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.shift_tracker.shift_tracker.employees.service import EmployeeService


class ScriptedCodes:
    """Returns the given codes in order."""

    def __init__(self, *codes: str):
        self._codes = list(codes)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return self._codes.pop(0)


def test_create_normalizes_national_id_and_assigns_code(employees_repo, clock):
    svc = EmployeeService(employees_repo, clock=clock, code_generator=ScriptedCodes("4SXQFMf"))

    employee = svc.create(name="  Carlos Santos ", national_id="518.391.378-19")

    assert employee.name == "Carlos Santos"
    assert employee.national_id == "51839137819"
    assert employee.code == "4SXQFMf"
    assert employee.hired_at == clock.now()
    assert employee.terminated_at is None
    assert employees_repo.find_by_code("4SXQFMf") == employee


def test_create_accepts_iso_hired_at(employees_repo, clock):
    svc = EmployeeService(employees_repo, clock=clock, code_generator=ScriptedCodes("1AAAAAa"))

    employee = svc.create(name="Ana", national_id="11144477735", hired_at="2024-12-30T17:00:00Z")

    assert employee.hired_at == datetime(2024, 12, 30, 17, 0, tzinfo=timezone.utc)


def test_create_rejects_invalid_national_id(employees_repo, clock):
    svc = EmployeeService(employees_repo, clock=clock)

    with pytest.raises(ValidationError):
        svc.create(name="Ana", national_id="111.111.111-11")
    assert employees_repo.list_all() == []


def test_create_rejects_missing_name(employees_repo, clock):
    svc = EmployeeService(employees_repo, clock=clock)

    with pytest.raises(ValidationError):
        svc.create(name="   ", national_id="11144477735")


def test_create_rejects_duplicate_national_id(employees_repo, clock):
    svc = EmployeeService(employees_repo, clock=clock, code_generator=ScriptedCodes("1AAAAAa", "2BBBBBb"))
    svc.create(name="Ana", national_id="11144477735")

    with pytest.raises(ConflictError, match="already registered"):
        svc.create(name="Ana again", national_id="111.444.777-35")


def test_code_collision_is_retried(employees_repo, clock, employee):
    codes = ScriptedCodes(employee.code, "9ZZZZZz")
    svc = EmployeeService(employees_repo, clock=clock, code_generator=codes)

    created = svc.create(name="Ana", national_id="11144477735")

    assert created.code == "9ZZZZZz"
    assert codes.calls == 2


def test_code_collisions_exhaust_attempts(employees_repo, clock, employee):
    codes = ScriptedCodes(*[employee.code] * 3)
    svc = EmployeeService(employees_repo, clock=clock, code_generator=codes, max_code_attempts=3)

    with pytest.raises(ConflictError):
        svc.create(name="Ana", national_id="11144477735")
    assert codes.calls == 3


def test_get_unknown_employee_raises(employees_repo, clock):
    with pytest.raises(NotFoundError):
        EmployeeService(employees_repo, clock=clock).get("missing")


def test_update_changes_only_given_fields(employees_repo, clock, employee):
    svc = EmployeeService(employees_repo, clock=clock)

    updated = svc.update(employee.employee_id, name="John Smith")

    assert updated.name == "John Smith"
    assert updated.hired_at == employee.hired_at
    assert updated.national_id == employee.national_id
    assert updated.code == employee.code


def test_update_rejects_clearing_hired_at(employees_repo, clock, employee):
    with pytest.raises(ValidationError):
        EmployeeService(employees_repo, clock=clock).update(employee.employee_id, hired_at=None)


def test_terminate_sets_date_once(employees_repo, clock, employee):
    svc = EmployeeService(employees_repo, clock=clock)

    terminated = svc.terminate(employee.employee_id)
    assert terminated.terminated_at == clock.now()
    assert not terminated.is_active

    with pytest.raises(ConflictError):
        svc.terminate(employee.employee_id)


def test_delete_removes_employee(employees_repo, clock, employee):
    svc = EmployeeService(employees_repo, clock=clock)

    svc.delete(employee.employee_id)

    assert employees_repo.find_by_id(employee.employee_id) is None
    with pytest.raises(NotFoundError):
        svc.delete(employee.employee_id)
