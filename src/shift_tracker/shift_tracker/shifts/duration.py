"""Elapsed-time arithmetic for shift records.

All functions are pure given their inputs: the current instant only enters
through the injected clock, and only when a shift is still open.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.clock import Clock
from ..core.constants import MS_PER_HOUR, MS_PER_MINUTE
from .model import ShiftRecord


def duration_ms(start: datetime, end: Optional[datetime], clock: Clock) -> int:
    """Milliseconds from start to end (or to clock.now() when end is None).

    The result is negative when end precedes start; no clamping here.
    """
    finish = end if end is not None else clock.now()
    delta = finish - start
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def format_duration(ms: int) -> str:
    """Render milliseconds as "HHh MMm", e.g. 9_000_000 -> "02h 30m".

    Negative values keep a single leading sign: -600_000 -> "-00h 10m".
    """
    sign = "-" if ms < 0 else ""
    ms = abs(ms)
    hours = ms // MS_PER_HOUR
    minutes = (ms % MS_PER_HOUR) // MS_PER_MINUTE
    return f"{sign}{hours:02d}h {minutes:02d}m"


def total_worked(records: Iterable[ShiftRecord], clock: Clock) -> str:
    """Sum of record durations; records with a negative duration count as zero."""
    total = 0
    for record in records:
        ms = duration_ms(record.start_time, record.end_time, clock)
        if ms > 0:
            total += ms
    return format_duration(total)
