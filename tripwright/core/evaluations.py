"""Lightweight quality checks for generated travel plans."""

from __future__ import annotations

from typing import List, Mapping, MutableMapping, Optional

from tripwright.core.geo import distance_km
from tripwright.core.mapping import project_map
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.core.transport import clock_minutes
from tripwright.schemas import TravelPlan


def daily_transfer_distance_km(plan: TravelPlan) -> Mapping[str, float]:
    """Calculate per-day walking distance between consecutive stops."""

    totals: MutableMapping[str, float] = {}
    for day in plan.itinerary:
        total_distance = 0.0
        for first, second in zip(day.stops, day.stops[1:]):
            total_distance += distance_km(first.coordinates, second.coordinates)
        totals[f"Day {day.day}"] = total_distance
    return totals


def has_dense_orders(plan: TravelPlan) -> bool:
    """Return True when every day numbers its stops exactly ``1..k``."""

    return all(
        [stop.order for stop in day.stops] == list(range(1, len(day.stops) + 1))
        for day in plan.itinerary
    )


def has_unique_stop_ids(plan: TravelPlan) -> bool:
    ids = [stop.id for stop in plan.all_stops()]
    return len(ids) == len(set(ids))


def days_over_ceiling(
    plan: TravelPlan, *, settings: Optional[PlannerSettings] = None
) -> List[int]:
    """Return the day numbers whose stop durations exceed the daily ceiling."""

    ceiling = (settings or load_settings()).day_ceiling_hours
    return [day.day for day in plan.itinerary if day.total_hours > ceiling + 1e-9]


def timing_conflicts(plan: TravelPlan) -> int:
    """Count stops that start before the previous stop in the same day ends."""

    conflicts = 0
    for day in plan.itinerary:
        for first, second in zip(day.stops, day.stops[1:]):
            if not first.departure or not second.arrival:
                continue
            if clock_minutes(second.arrival) < clock_minutes(first.departure):
                conflicts += 1
    return conflicts


def category_diversity_score(plan: TravelPlan) -> int:
    """Return the count of distinct stop categories across the itinerary."""

    return len({stop.category.lower() for stop in plan.all_stops() if stop.category})


def is_consistent(plan: TravelPlan, *, settings: Optional[PlannerSettings] = None) -> bool:
    """Return True when the plan structure and its map projection agree."""

    return (
        len(plan.itinerary) == plan.goal.days
        and plan.selected_transport in plan.transport_options
        and has_dense_orders(plan)
        and has_unique_stop_ids(plan)
        and not days_over_ceiling(plan, settings=settings)
        and plan.map == project_map(plan)
    )


__all__ = [
    "category_diversity_score",
    "daily_transfer_distance_km",
    "days_over_ceiling",
    "has_dense_orders",
    "has_unique_stop_ids",
    "is_consistent",
    "timing_conflicts",
]
