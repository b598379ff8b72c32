from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from src.shift_tracker.shift_tracker.container import build_container_from_settings
from src.shift_tracker.shift_tracker.core.constants import DEFAULT_CODE_MAX_ATTEMPTS, DEFAULT_HISTORY_SINCE
from src.shift_tracker.shift_tracker.database.connection import DatabaseConnection

DB_CONFIG = {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": "shift_tracker_test"}


@pytest.fixture(autouse=True)
def fresh_connection_factory(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_instance", None)


def test_settings_reach_the_services():
    settings = SimpleNamespace(DB_CONFIG=DB_CONFIG, HISTORY_SINCE="2025-01-01", EMPLOYEE_CODE_MAX_ATTEMPTS="2")

    container = build_container_from_settings(settings)

    assert container.shift_service._history_since == date(2025, 1, 1)
    assert container.employee_service._max_code_attempts == 2


def test_missing_settings_fall_back_to_defaults():
    container = build_container_from_settings(SimpleNamespace(DB_CONFIG=DB_CONFIG))

    assert container.shift_service._history_since == DEFAULT_HISTORY_SINCE
    assert container.employee_service._max_code_attempts == DEFAULT_CODE_MAX_ATTEMPTS
