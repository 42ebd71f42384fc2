from __future__ import annotations

import pytest

from tripwright.core.evaluations import (
    category_diversity_score,
    daily_transfer_distance_km,
    days_over_ceiling,
    has_dense_orders,
    has_unique_stop_ids,
    is_consistent,
    timing_conflicts,
)
from tripwright.core.mapping import project_map
from tripwright.core.settings import PlannerSettings
from tripwright.core.transport import build_transport_options, pick_best_by_cost, pick_best_by_time
from tripwright.schemas import Goal, ItineraryDay, Place, Stop, TravelPlan


def _stop(stop_id: str, order: int, latitude: float, longitude: float, **extra) -> Stop:
    return Stop(
        id=stop_id,
        name=stop_id.replace("-", " ").title(),
        category=extra.pop("category", "culture"),
        order=order,
        duration_hours=extra.pop("duration_hours", 2.0),
        latitude=latitude,
        longitude=longitude,
        **extra,
    )


def _build_sample_plan(*, days=None) -> TravelPlan:
    goal = Goal(
        origin=Place(name="Osaka", latitude=34.6937, longitude=135.5023),
        destination=Place(name="Kyoto", latitude=35.0116, longitude=135.7681),
        days=2,
    )
    options = build_transport_options(goal)
    itinerary = days or [
        ItineraryDay(
            day=1,
            stops=[
                _stop("morning-cafe", 1, 35.0116, 135.7681, category="food",
                      arrival="09:00", departure="11:00"),
                _stop("bamboo-grove", 2, 35.0150, 135.7697,
                      arrival="11:30", departure="13:30"),
            ],
        ),
        ItineraryDay(
            day=2,
            stops=[
                _stop("art-museum", 1, 35.0140, 135.7800, category="art",
                      arrival="09:00", departure="11:00"),
                _stop("zen-garden", 2, 35.0180, 135.7760, category="nature",
                      arrival="10:30", departure="12:30"),
            ],
        ),
    ]
    plan = TravelPlan(
        goal=goal,
        transport_options=options,
        best_by_cost=pick_best_by_cost(options),
        best_by_time=pick_best_by_time(options),
        selected_transport=pick_best_by_cost(options),
        itinerary=itinerary,
    )
    return plan.model_copy(update={"map": project_map(plan)})


def test_daily_transfer_distance_per_day() -> None:
    distances = daily_transfer_distance_km(_build_sample_plan())

    assert set(distances) == {"Day 1", "Day 2"}
    assert distances["Day 1"] == pytest.approx(0.41, abs=0.05)
    assert distances["Day 2"] > 0


def test_timing_conflicts_detects_overlaps() -> None:
    assert timing_conflicts(_build_sample_plan()) == 1


def test_category_diversity_score() -> None:
    assert category_diversity_score(_build_sample_plan()) == 4


def test_structural_checks() -> None:
    plan = _build_sample_plan()

    assert has_dense_orders(plan)
    assert has_unique_stop_ids(plan)
    assert days_over_ceiling(plan, settings=PlannerSettings()) == []
    assert is_consistent(plan, settings=PlannerSettings())


def test_structural_checks_flag_broken_plans() -> None:
    broken = _build_sample_plan(
        days=[
            ItineraryDay(
                day=1,
                stops=[
                    _stop("long-walk", 2, 35.0, 135.7, duration_hours=6.0),
                    _stop("long-walk", 3, 35.0, 135.7, duration_hours=5.0),
                ],
            ),
            ItineraryDay(day=2),
        ]
    )

    assert not has_dense_orders(broken)
    assert not has_unique_stop_ids(broken)
    assert days_over_ceiling(broken, settings=PlannerSettings()) == [1]
    assert not is_consistent(broken, settings=PlannerSettings())
