"""Create demo employees through the regular onboarding path.

Already registered national IDs are skipped, so the script can be re-run.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shift_tracker.shift_tracker.container import build_container_from_settings
from src.shift_tracker.shift_tracker.core.exceptions import ConflictError

DEMO_EMPLOYEES = [
    ("Carlos Santos", "529.982.247-25"),
    ("Ana Souza", "111.444.777-35"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    for name, national_id in DEMO_EMPLOYEES:
        try:
            employee = container.employee_service.create(name=name, national_id=national_id)
        except ConflictError as e:
            print(f"SKIP: {name} ({e})")
            continue
        print(f"OK: {employee.name} -> code {employee.code}")


if __name__ == "__main__":
    main()
