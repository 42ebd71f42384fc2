"""Editor agent that turns plan changes into user-facing status text."""

from __future__ import annotations

from typing import List, Union

from tripwright.core.formatting import format_currency, format_duration
from tripwright.schemas import TransportMode, TravelPlan

_EDIT_IMPACT = {
    "swap": (
        "Swapped in the closest unscheduled alternative, kept its slot in the day "
        "and re-timed everything after it."
    ),
    "remove": (
        "Removed the stop, closed the gap in the running order and pulled the "
        "rest of the day forward."
    ),
    "duration": (
        "Updated the visit length and re-timed the day. Other stops are trimmed "
        "if the day would run past its limit."
    ),
}

_FALLBACK_IMPACT = "Updated the plan and recalculated timings and map legs."


def explain_editing_impact(kind: str) -> str:
    """Return a one-line explanation for a ``swap``, ``remove`` or ``duration`` edit."""

    return _EDIT_IMPACT.get((kind or "").strip().lower(), _FALLBACK_IMPACT)


class Editor:
    """Narrates plans and edits for the presentation layer."""

    def describe_plan(self, plan: TravelPlan) -> str:
        mode = plan.best_by_cost.mode.value.lower()
        return (
            f"Optimized for value via {mode} and built a {plan.goal.days}-day circuit "
            f"around {plan.goal.destination.name}."
        )

    def describe_transport_change(self, mode: Union[TransportMode, str]) -> str:
        label = mode.value if isinstance(mode, TransportMode) else str(mode)
        return f"Locked in {label.lower()} and recalculated routing."

    def reasoning(self, plan: TravelPlan) -> List[str]:
        """Bullet lines explaining how the plan was assembled."""

        lines: List[str] = []
        goal = plan.goal
        busy_days = [day for day in plan.itinerary if day.stops]
        lines.append(
            f"Split {sum(len(day.stops) for day in plan.itinerary)} stops around "
            f"{goal.destination.name} into {goal.days} neighbourhood bands by compass "
            "direction, then walked each band nearest-first to limit zig-zag travel."
        )
        if goal.theme:
            lines.append(f"Put {goal.theme} stops first because the goal mentions {goal.theme}.")

        cheapest = plan.best_by_cost
        fastest = plan.best_by_time
        if cheapest.mode == fastest.mode:
            lines.append(
                f"{cheapest.mode.value} is both the cheapest ({format_currency(cheapest.price_usd)}) "
                f"and the fastest ({format_duration(cheapest.duration_hours)}) way to get there."
            )
        else:
            lines.append(
                f"Defaulted to {cheapest.mode.value.lower()} at {format_currency(cheapest.price_usd)}; "
                f"{fastest.mode.value.lower()} saves "
                f"{format_duration(cheapest.duration_hours - fastest.duration_hours)} "
                "and stays available in the selector."
            )

        if busy_days:
            longest = max(busy_days, key=lambda day: day.total_hours)
            lines.append(
                f"Day {longest.day} is the fullest at {format_duration(longest.total_hours)} of visits."
            )
        lines.append(
            "Edits re-plan only the affected day, recalculating times and map legs "
            "while keeping every other day as it was."
        )
        return lines


__all__ = ["Editor", "explain_editing_impact"]
