"""Tripwright Streamlit UI helpers."""

from __future__ import annotations

from .itinerary import render_itinerary_tab
from .map import build_deck, render_map_tab
from .plan import ensure_plan_state, render_plan_tab, undo_last_edit

__all__ = [
    "build_deck",
    "ensure_plan_state",
    "render_itinerary_tab",
    "render_map_tab",
    "render_plan_tab",
    "undo_last_edit",
]
