from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    from_db_datetime,
    is_duplicate_key,
    to_db_datetime,
)
from .model import Employee
from .repository import EmployeeDirectory

_COLUMNS = "employee_id, name, national_id, code, hired_at, terminated_at, created_at"


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        name=row["name"],
        national_id=row["national_id"],
        code=row["code"],
        hired_at=from_db_datetime(row["hired_at"]),
        terminated_at=from_db_datetime(row.get("terminated_at")),
        created_at=from_db_datetime(row.get("created_at")),
    )


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _find_one(self, where: str, value: object) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE {where}=%s", (value,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def find_by_code(self, code: str) -> Optional[Employee]:
        return self._find_one("code", code)

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._find_one("employee_id", employee_id)

    def exists(self, national_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE national_id=%s", (national_id,))
            return fetchone(cur) is not None

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
        employee_id = str(uuid.uuid4())
        created_at = created_at or hired_at
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(employee_id, name, national_id, code, hired_at, terminated_at, created_at)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee_id,
                        name,
                        national_id,
                        code,
                        to_db_datetime(hired_at),
                        to_db_datetime(terminated_at),
                        to_db_datetime(created_at),
                    ),
                )
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise ConflictError("employee already registered") from e
            raise

        return Employee(
            employee_id=employee_id,
            name=name,
            national_id=national_id,
            code=code,
            hired_at=hired_at,
            terminated_at=terminated_at,
            created_at=created_at,
        )

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at, name")
            return [_to_employee(r) for r in fetchall(cur)]

    def update(
        self,
        *,
        employee_id: str,
        name: str,
        hired_at: datetime,
        terminated_at: Optional[datetime],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, hired_at=%s, terminated_at=%s
                WHERE employee_id=%s
                """,
                (name, to_db_datetime(hired_at), to_db_datetime(terminated_at), employee_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
