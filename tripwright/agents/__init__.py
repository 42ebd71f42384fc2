"""Planning agents for the Tripwright engine."""

from __future__ import annotations


class PlanEditError(RuntimeError):
    """Raised when an edit references a day, stop or mode the plan does not have."""


from .editor import Editor, explain_editing_impact
from .intake import GoalInterpreter, interpret_goal
from .planner import DAY_PALETTE, ItineraryBuilder
from .refiner import (
    EditEngine,
    adjust_stop_duration,
    change_transport_mode,
    swap_stop_with_alternative,
    update_itinerary_after_removal,
)
from .researcher import StopCatalog, clear_catalog_cache

__all__ = [
    "DAY_PALETTE",
    "EditEngine",
    "Editor",
    "GoalInterpreter",
    "ItineraryBuilder",
    "PlanEditError",
    "StopCatalog",
    "adjust_stop_duration",
    "change_transport_mode",
    "clear_catalog_cache",
    "explain_editing_impact",
    "interpret_goal",
    "swap_stop_with_alternative",
    "update_itinerary_after_removal",
]
