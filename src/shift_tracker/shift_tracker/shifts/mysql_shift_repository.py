from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    from_db_datetime,
    is_duplicate_key,
    to_db_datetime,
)
from .model import ShiftRecord
from .repository import ShiftStore

_COLUMNS = "shift_id, employee_id, start_time, end_time, shift_date, created_at"


def _to_record(r: Dict[str, Any]) -> ShiftRecord:
    return ShiftRecord(
        shift_id=int(r["shift_id"]),
        employee_id=str(r["employee_id"]),
        start_time=from_db_datetime(r["start_time"]),
        end_time=from_db_datetime(r.get("end_time")),
        shift_date=r["shift_date"],
        created_at=from_db_datetime(r.get("created_at")),
    )


class MySQLShiftStore(ShiftStore):
    """shift_records table.

    The unique key uq_open_shift (employee_id, shift_date, open_marker) rejects a
    second open record for the same day; open_marker is NULL once closed.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_open(self, *, employee_id: str, shift_date: date, start_time: datetime) -> ShiftRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO shift_records(employee_id, start_time, shift_date, created_at)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee_id, to_db_datetime(start_time), shift_date, to_db_datetime(start_time)),
                )
                shift_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise ConflictError("shift already started") from e
            raise

        return ShiftRecord(
            shift_id=shift_id,
            employee_id=employee_id,
            start_time=start_time,
            end_time=None,
            shift_date=shift_date,
            created_at=start_time,
        )

    def close_open(self, *, employee_id: str, shift_date: date, end_time: datetime) -> ShiftRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE employee_id=%s AND shift_date=%s AND end_time IS NULL
                FOR UPDATE
                """,
                (employee_id, shift_date),
            )
            r = fetchone(cur)
            if not r:
                raise NotFoundError("no active shift")

            cur.execute(
                "UPDATE shift_records SET end_time=%s WHERE shift_id=%s AND end_time IS NULL",
                (to_db_datetime(end_time), int(r["shift_id"])),
            )
            if cur.rowcount == 0:
                raise NotFoundError("no active shift")

            r["end_time"] = to_db_datetime(end_time)
            return _to_record(r)

    def find_open(self, employee_id: str, shift_date: date) -> Optional[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE employee_id=%s AND shift_date=%s AND end_time IS NULL
                """,
                (employee_id, shift_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find_by_date(self, employee_id: str, shift_date: date) -> Sequence[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE employee_id=%s AND shift_date=%s
                ORDER BY start_time ASC, shift_id ASC
                """,
                (employee_id, shift_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def find_since(self, employee_id: str, since: date) -> Sequence[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE employee_id=%s AND shift_date >= %s
                ORDER BY start_time ASC, shift_id ASC
                """,
                (employee_id, since),
            )
            return [_to_record(r) for r in fetchall(cur)]
