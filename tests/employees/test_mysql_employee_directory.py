from __future__ import annotations

from datetime import datetime, timezone

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.shift_tracker.shift_tracker.core.exceptions import ConflictError
from src.shift_tracker.shift_tracker.employees.mysql_employee_repository import MySQLEmployeeDirectory

HIRED = datetime(2024, 12, 30, 17, 0, tzinfo=timezone.utc)


def _create(directory: MySQLEmployeeDirectory):
    return directory.create(name="Ana", national_id="11144477735", code="1ABCDEf", hired_at=HIRED)


def test_create_inserts_and_returns_employee(scripted_db):
    db = scripted_db({"rowcount": 1})

    employee = _create(MySQLEmployeeDirectory(db))

    assert len(employee.employee_id) == 36
    assert employee.code == "1ABCDEf"
    assert employee.created_at == HIRED
    sql, params = db.executed[0]
    assert sql.startswith("INSERT INTO employees")
    assert params[0] == employee.employee_id
    assert params[4] == datetime(2024, 12, 30, 17, 0)


def test_duplicate_key_on_create_becomes_conflict(scripted_db):
    db = scripted_db(mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(ConflictError, match="already registered"):
        _create(MySQLEmployeeDirectory(db))
    assert db.rollbacks == 1


def test_find_by_code_maps_row(scripted_db):
    row = {
        "employee_id": "emp-1",
        "name": "Ana",
        "national_id": "11144477735",
        "code": "1ABCDEf",
        "hired_at": datetime(2024, 12, 30, 17, 0),
        "terminated_at": None,
        "created_at": datetime(2024, 12, 30, 17, 0),
    }
    db = scripted_db({"rows": [row]})

    employee = MySQLEmployeeDirectory(db).find_by_code("1ABCDEf")

    assert employee.hired_at == HIRED
    assert employee.is_active
    assert db.executed[0][1] == ("1ABCDEf",)


def test_exists(scripted_db):
    assert MySQLEmployeeDirectory(scripted_db({"rows": [{"found": 1}]})).exists("11144477735") is True
    assert MySQLEmployeeDirectory(scripted_db({"rows": []})).exists("11144477735") is False
