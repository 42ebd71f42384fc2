from __future__ import annotations

import logging
from datetime import time

from tripwright.agents import GoalInterpreter
from tripwright.core.settings import PlannerSettings, load_settings


def test_defaults_without_environment(monkeypatch) -> None:
    for name in (
        "TRIPWRIGHT_DAY_START",
        "TRIPWRIGHT_TRANSIT_BUFFER_HOURS",
        "TRIPWRIGHT_DAY_CEILING_HOURS",
        "TRIPWRIGHT_DAY_COST_CEILING_USD",
        "TRIPWRIGHT_STOPS_PER_DAY",
        "TRIPWRIGHT_DEFAULT_DAYS",
        "TRIPWRIGHT_MAX_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == PlannerSettings()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TRIPWRIGHT_DAY_START", "08:30")
    monkeypatch.setenv("TRIPWRIGHT_TRANSIT_BUFFER_HOURS", "0.25")
    monkeypatch.setenv("TRIPWRIGHT_DAY_CEILING_HOURS", "8")
    monkeypatch.setenv("TRIPWRIGHT_STOPS_PER_DAY", "3")

    settings = load_settings()

    assert settings.day_start == time(8, 30)
    assert settings.transit_buffer_hours == 0.25
    assert settings.day_ceiling_hours == 8.0
    assert settings.stops_per_day == 3


def test_invalid_values_fall_back_with_warning(monkeypatch, caplog) -> None:
    monkeypatch.setenv("TRIPWRIGHT_DAY_START", "breakfast")
    monkeypatch.setenv("TRIPWRIGHT_MAX_DAYS", "-2")

    with caplog.at_level(logging.WARNING, logger="tripwright.core.settings"):
        settings = load_settings()

    assert settings.day_start == time(9, 0)
    assert settings.max_days == 7
    assert "TRIPWRIGHT_DAY_START" in caplog.text
    assert "TRIPWRIGHT_MAX_DAYS" in caplog.text


def test_default_days_never_exceed_max_days(monkeypatch) -> None:
    monkeypatch.setenv("TRIPWRIGHT_DEFAULT_DAYS", "5")
    monkeypatch.setenv("TRIPWRIGHT_MAX_DAYS", "3")

    settings = load_settings()

    assert settings.default_days == 3
    assert settings.max_days == 3


def test_interpreter_respects_day_limits(monkeypatch) -> None:
    monkeypatch.setenv("TRIPWRIGHT_MAX_DAYS", "3")
    monkeypatch.setenv("TRIPWRIGHT_DEFAULT_DAYS", "2")

    interpreter = GoalInterpreter()

    assert interpreter.run("5 days in Paris").days == 3
    assert interpreter.run("Visit Paris").days == 2
