from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.clock import Clock, SystemClock
from ..common.logging_utils import get_logger
from ..common.validators import optional_datetime, require_non_empty
from ..core.constants import DEFAULT_CODE_MAX_ATTEMPTS
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .code_generator import EmployeeCodeGenerator
from .model import Employee
from .national_id import require_valid_national_id
from .repository import EmployeeDirectory

logger = get_logger("employees.service")

UNSET: Any = object()


class EmployeeService:
    """Use case: onboard and manage employees."""

    def __init__(
        self,
        employees: EmployeeDirectory,
        *,
        clock: Optional[Clock] = None,
        code_generator: Optional[EmployeeCodeGenerator] = None,
        max_code_attempts: int = DEFAULT_CODE_MAX_ATTEMPTS,
    ):
        self._employees = employees
        self._clock = clock or SystemClock()
        self._codes = code_generator or EmployeeCodeGenerator()
        self._max_code_attempts = max(1, int(max_code_attempts))

    def _new_code(self) -> str:
        for _ in range(self._max_code_attempts):
            candidate = self._codes.generate()
            if self._employees.find_by_code(candidate) is None:
                return candidate
            logger.debug("employee code %s already taken, retrying", candidate)
        raise ConflictError("could not generate a unique employee code")

    def create(
        self,
        *,
        name: str,
        national_id: str,
        hired_at: Any = None,
        terminated_at: Any = None,
    ) -> Employee:
        name = require_non_empty(name, "name")
        national_id = require_valid_national_id(national_id)
        hired = optional_datetime(hired_at, "hired_at")
        terminated = optional_datetime(terminated_at, "terminated_at")

        if self._employees.exists(national_id):
            logger.warning("rejected employee creation: national ID already registered")
            raise ConflictError("national ID already registered")

        now = self._clock.now()
        employee = self._employees.create(
            name=name,
            national_id=national_id,
            code=self._new_code(),
            hired_at=hired or now,
            terminated_at=terminated,
            created_at=now,
        )
        logger.info("employee %s created with code %s", employee.employee_id, employee.code)
        return employee

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.find_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"employee {employee_id} not found")
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def update(
        self,
        employee_id: str,
        *,
        name: Any = UNSET,
        hired_at: Any = UNSET,
        terminated_at: Any = UNSET,
    ) -> Employee:
        """Change mutable fields only; national ID and code never change."""

        current = self.get(employee_id)

        new_name = current.name if name is UNSET else require_non_empty(name, "name")
        if hired_at is UNSET:
            new_hired = current.hired_at
        else:
            new_hired = optional_datetime(hired_at, "hired_at")
            if new_hired is None:
                raise ValidationError("hired_at is required")
        new_terminated = (
            current.terminated_at if terminated_at is UNSET else optional_datetime(terminated_at, "terminated_at")
        )

        self._employees.update(
            employee_id=employee_id,
            name=new_name,
            hired_at=new_hired,
            terminated_at=new_terminated,
        )
        logger.info("employee %s updated", employee_id)
        return self.get(employee_id)

    def terminate(self, employee_id: str) -> Employee:
        current = self.get(employee_id)
        if current.terminated_at is not None:
            raise ConflictError("employee already terminated")
        return self.update(employee_id, terminated_at=self._clock.now())

    def delete(self, employee_id: str) -> None:
        self.get(employee_id)
        self._employees.delete_by_id(employee_id)
        logger.info("employee %s deleted", employee_id)
