from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..common.clock import Clock


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: one clock-in/clock-out pair.

    end_time is None while the shift is open.
    """

    shift_id: int
    employee_id: str
    start_time: datetime
    end_time: Optional[datetime]
    shift_date: date
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    def worked_hours(self, clock: "Clock") -> str:
        from .duration import duration_ms, format_duration

        return format_duration(duration_ms(self.start_time, self.end_time, clock))


@dataclass(frozen=True)
class TodayHours:
    """Read-model for the current day: first start, last end, elapsed time."""

    start_time: datetime
    end_time: Optional[datetime]
    worked_hours: str


@dataclass(frozen=True)
class HistoryEntry:
    date: date
    start_time: datetime
    end_time: Optional[datetime]
    worked_hours: str
