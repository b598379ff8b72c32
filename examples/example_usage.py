"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the shift rules live in ShiftService.
"""

import importlib
import sys

from config import get_settings_module

from src.shift_tracker.shift_tracker.container import build_container_from_settings
from src.shift_tracker.shift_tracker.core.exceptions import DomainError


def main(code: str) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)
    shifts = container.shift_service

    try:
        today = shifts.hours_today(code)
        print(f"today: {today.start_time:%H:%M} -> {today.end_time or 'working'} ({today.worked_hours})")
        for entry in shifts.hours_history(code):
            print(f"{entry.date}: {entry.worked_hours}")
    except DomainError as e:
        print(f"error: {e}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "EMP123")
