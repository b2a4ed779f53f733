"""Shared fixtures for the calculator test-suite."""
from __future__ import annotations

import os

# Keep test runs from writing daily log files.
os.environ["LOG_DIR"] = ""

import pytest

from salary_calc.core.config import (
    CalculatorDefaults,
    LoggingSettings,
    Settings,
    get_settings,
)
from salary_calc.domain import SalaryTable


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        defaults=CalculatorDefaults(scale=11, step=5, hours=36, hours_options=(27, 36, 38, 40)),
        logging=LoggingSettings(level="DEBUG", log_dir=None),
    )


@pytest.fixture()
def example_table() -> SalaryTable:
    """Small table where scale 11 step 5 pays a round 4000 per month."""

    return SalaryTable(
        {
            11: {4: "3900.00", 5: "4000.00"},
            12: {0: "4100.00"},
        },
        version="test",
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
