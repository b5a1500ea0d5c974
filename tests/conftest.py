"""Shared fixtures for the test suite."""

import pytest

from visa_planner.config import get_settings
from visa_planner.visa_data import get_visa_table


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    monkeypatch.setenv("VISA_PLANNER_DELAY_SECONDS", "0")
    monkeypatch.delenv("VISA_PLANNER_DATA_PATH", raising=False)
    get_settings.cache_clear()
    get_visa_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_visa_table.cache_clear()
