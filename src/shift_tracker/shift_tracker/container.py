from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .common.clock import Clock, SystemClock
from .common.datetime_utils import parse_iso_date
from .core.constants import DEFAULT_CODE_MAX_ATTEMPTS, DEFAULT_HISTORY_SINCE
from .database.connection import DBConfig, DatabaseConnection
from .employees.code_generator import EmployeeCodeGenerator
from .employees.mysql_employee_repository import MySQLEmployeeDirectory
from .employees.repository import EmployeeDirectory
from .employees.service import EmployeeService
from .shifts.mysql_shift_repository import MySQLShiftStore
from .shifts.repository import ShiftStore
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeDirectory
    shifts_repo: ShiftStore
    clock: Clock

    employee_service: EmployeeService
    shift_service: ShiftService


def wire_services(
    *,
    employees_repo: EmployeeDirectory,
    shifts_repo: ShiftStore,
    clock: Optional[Clock] = None,
    history_since: date = DEFAULT_HISTORY_SINCE,
    max_code_attempts: int = DEFAULT_CODE_MAX_ATTEMPTS,
    code_generator: Optional[EmployeeCodeGenerator] = None,
) -> Container:
    clock = clock or SystemClock()

    employee_service = EmployeeService(
        employees_repo,
        clock=clock,
        code_generator=code_generator,
        max_code_attempts=max_code_attempts,
    )
    shift_service = ShiftService(
        shifts_repo,
        employees_repo,
        clock=clock,
        history_since=history_since,
    )

    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        clock=clock,
        employee_service=employee_service,
        shift_service=shift_service,
    )


def build_container(
    *,
    db_config: dict,
    history_since: date = DEFAULT_HISTORY_SINCE,
    max_code_attempts: int = DEFAULT_CODE_MAX_ATTEMPTS,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire_services(
        employees_repo=MySQLEmployeeDirectory(conn),
        shifts_repo=MySQLShiftStore(conn),
        history_since=history_since,
        max_code_attempts=max_code_attempts,
    )


def build_container_from_settings(settings) -> Container:
    """Build from a config.* settings module (DB_CONFIG, HISTORY_SINCE, EMPLOYEE_CODE_MAX_ATTEMPTS)."""
    history_since = getattr(settings, "HISTORY_SINCE", None)
    return build_container(
        db_config=dict(getattr(settings, "DB_CONFIG")),
        history_since=parse_iso_date(history_since) if history_since else DEFAULT_HISTORY_SINCE,
        max_code_attempts=int(getattr(settings, "EMPLOYEE_CODE_MAX_ATTEMPTS", DEFAULT_CODE_MAX_ATTEMPTS)),
    )
