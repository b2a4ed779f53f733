from __future__ import annotations

from pathlib import Path

import pytest

from salary_calc.core.config import Settings, get_settings

ENV_VARS = (
    "SALARY_DEFAULT_SCALE",
    "SALARY_DEFAULT_STEP",
    "SALARY_DEFAULT_HOURS",
    "SALARY_HOURS_OPTIONS",
    "LOG_LEVEL",
    "APP_TITLE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_get_settings_uses_default_configuration() -> None:
    settings = get_settings()

    assert settings.defaults.scale == 11
    assert settings.defaults.step == 5
    assert settings.defaults.hours == 36
    assert settings.defaults.hours_options == (27, 36, 38, 40)
    assert settings.logging.level == "INFO"
    assert settings.logging.log_dir is None
    assert get_settings() is settings


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SALARY_DEFAULT_SCALE", "8")
    monkeypatch.setenv("SALARY_DEFAULT_STEP", "0")
    monkeypatch.setenv("SALARY_DEFAULT_HOURS", "32")
    monkeypatch.setenv("SALARY_HOURS_OPTIONS", "40, 32,36,32")
    monkeypatch.setenv("LOG_DIR", "var/log")
    monkeypatch.setenv("APP_TITLE", "Salarisschalen")

    settings = Settings.from_env()

    assert (settings.defaults.scale, settings.defaults.step, settings.defaults.hours) == (8, 0, 32)
    assert settings.defaults.hours_options == (32, 36, 40)
    assert settings.logging.log_dir == Path("var/log")
    assert settings.app_title == "Salarisschalen"


def test_default_combination_must_exist(monkeypatch) -> None:
    monkeypatch.setenv("SALARY_DEFAULT_STEP", "30")

    with pytest.raises(ValueError, match="not part of the salary table"):
        Settings.from_env()


def test_default_hours_must_be_an_option(monkeypatch) -> None:
    monkeypatch.setenv("SALARY_DEFAULT_HOURS", "24")

    with pytest.raises(ValueError, match="SALARY_DEFAULT_HOURS"):
        Settings.from_env()


@pytest.mark.parametrize("value", ["27,abc", "0,36", ""])
def test_invalid_hours_options(monkeypatch, value: str) -> None:
    monkeypatch.setenv("SALARY_HOURS_OPTIONS", value)

    with pytest.raises(ValueError):
        Settings.from_env()


def test_non_numeric_default_scale(monkeypatch) -> None:
    monkeypatch.setenv("SALARY_DEFAULT_SCALE", "eleven")

    with pytest.raises(ValueError, match="SALARY_DEFAULT_SCALE must be an integer"):
        Settings.from_env()
