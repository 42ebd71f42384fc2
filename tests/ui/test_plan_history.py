"""Tests for the session-state plan history behind the Undo button."""

from __future__ import annotations

from datetime import time

import pytest

from tripwright import adjust_stop_duration, update_itinerary_after_removal
from tripwright.agents import clear_catalog_cache
from tripwright.core.settings import PlannerSettings
from tripwright.ui import plan as plan_ui


@pytest.fixture
def state() -> dict:
    clear_catalog_cache()
    session: dict = {}
    plan_ui.ensure_plan_state(session)
    return session


def test_ensure_plan_state_seeds_defaults(state: dict) -> None:
    assert state[plan_ui.PLAN_KEY] is None
    assert state[plan_ui.HISTORY_KEY] == []
    assert state[plan_ui.STATUS_KEY] is None


def test_start_new_plan_resets_history(state: dict) -> None:
    state[plan_ui.HISTORY_KEY] = ["stale"]

    plan = plan_ui.start_new_plan("Plan a 2-day trip to Tokyo from New Delhi", state)

    assert plan_ui.current_plan(state) is plan
    assert state[plan_ui.HISTORY_KEY] == []
    assert state[plan_ui.STATUS_KEY].startswith("Optimized for value via flight")


def test_commit_and_undo_round_trip(state: dict) -> None:
    original = plan_ui.start_new_plan("Plan a 2-day trip to Tokyo from New Delhi", state)
    stop_id = original.itinerary[0].stops[0].id
    edited = update_itinerary_after_removal(original, 0, stop_id)

    assert plan_ui.commit_plan(edited, "removed", state)
    assert plan_ui.current_plan(state) is edited
    assert state[plan_ui.HISTORY_KEY] == [original]

    assert plan_ui.undo_last_edit(state)
    assert plan_ui.current_plan(state) is original
    assert state[plan_ui.HISTORY_KEY] == []
    assert not plan_ui.undo_last_edit(state)


def test_commit_ignores_no_op_edits(state: dict) -> None:
    original = plan_ui.start_new_plan("Plan a 2-day trip to Tokyo from New Delhi", state)
    unchanged = update_itinerary_after_removal(original, 0, "missing")

    assert not plan_ui.commit_plan(unchanged, "nothing", state)
    assert state[plan_ui.HISTORY_KEY] == []


def test_start_new_plan_remembers_its_settings(state: dict, monkeypatch) -> None:
    monkeypatch.setenv("TRIPWRIGHT_DAY_START", "08:00")

    plan = plan_ui.start_new_plan("Plan a 2-day trip to Tokyo from New Delhi", state)
    settings = plan_ui.plan_settings(state)

    assert isinstance(settings, PlannerSettings)
    assert settings.day_start == time(8, 0)
    assert plan.itinerary[0].stops[0].arrival == "08:00"

    monkeypatch.delenv("TRIPWRIGHT_DAY_START")
    stop = plan.itinerary[0].stops[0]
    edited = adjust_stop_duration(plan, 0, stop.id, stop.duration_hours + 1, settings=settings)

    assert edited.itinerary[0].stops[0].arrival == "08:00"
