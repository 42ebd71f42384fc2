"""Goal-driven travel itinerary planning."""

from tripwright.agents import (
    adjust_stop_duration,
    change_transport_mode,
    explain_editing_impact,
    swap_stop_with_alternative,
    update_itinerary_after_removal,
)
from tripwright.core.formatting import (
    format_carbon,
    format_currency,
    format_duration,
    format_stop_timing,
)
from tripwright.core.mapping import project_map
from tripwright.workflows import plan_trip

__all__ = [
    "adjust_stop_duration",
    "change_transport_mode",
    "explain_editing_impact",
    "format_carbon",
    "format_currency",
    "format_duration",
    "format_stop_timing",
    "plan_trip",
    "project_map",
    "swap_stop_with_alternative",
    "update_itinerary_after_removal",
]
