"""Sanity checks for the tripwright.ui package exports."""

from __future__ import annotations

def _is_callable(value: object) -> bool:
    return callable(value)


def test_tab_renderers_are_exposed() -> None:
    from tripwright import ui

    assert _is_callable(ui.render_plan_tab)
    assert _is_callable(ui.render_itinerary_tab)
    assert _is_callable(ui.render_map_tab)


def test_state_helpers_are_available() -> None:
    from tripwright import ui

    assert _is_callable(ui.ensure_plan_state)
    assert _is_callable(ui.undo_last_edit)
    assert _is_callable(ui.build_deck)


def test_app_entry_point_imports() -> None:
    import app

    assert _is_callable(app.configure)
    assert _is_callable(app.render)
