from __future__ import annotations

import pytest

from tripwright import plan_trip
from tripwright.agents import clear_catalog_cache
from tripwright.core.evaluations import has_dense_orders, has_unique_stop_ids, is_consistent
from tripwright.schemas import TransportMode


@pytest.fixture(autouse=True)
def _reset_catalog_cache():
    clear_catalog_cache()
    yield
    clear_catalog_cache()


def test_plan_trip_reference_goal() -> None:
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")

    assert plan.goal.days == 2
    assert "Delhi" in plan.goal.origin.name
    assert "Tokyo" in plan.goal.destination.name
    assert len(plan.itinerary) == 2
    assert plan.transport_options
    assert plan.selected_transport == plan.best_by_cost
    assert [day.day for day in plan.itinerary] == [1, 2]
    assert all(len(day.stops) == 4 for day in plan.itinerary)


def test_long_haul_trip_only_offers_flights() -> None:
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")

    assert [option.mode for option in plan.transport_options] == [TransportMode.FLIGHT]
    assert plan.best_by_cost.mode is TransportMode.FLIGHT
    assert plan.best_by_time.mode is TransportMode.FLIGHT


def test_best_picks_dominate_every_option() -> None:
    plan = plan_trip("3 days to Paris from London")

    assert len(plan.transport_options) == 4
    for option in plan.transport_options:
        assert plan.best_by_cost.price_usd <= option.price_usd
        assert plan.best_by_time.duration_hours <= option.duration_hours
    assert plan.best_by_cost.mode is TransportMode.BUS
    assert plan.best_by_time.mode is TransportMode.TRAIN


def test_itinerary_length_matches_goal_days() -> None:
    plan = plan_trip("A week exploring Kyoto from Tokyo")

    assert plan.goal.days == 7
    assert len(plan.itinerary) == 7
    assert has_dense_orders(plan)
    assert has_unique_stop_ids(plan)


def test_plan_is_consistent_after_planning() -> None:
    plan = plan_trip("Weekend in London from Paris with museums")

    assert is_consistent(plan)
    assert plan.goal.theme == "culture"


def test_unknown_destination_uses_synthesised_stops() -> None:
    plan = plan_trip("2 days to Atlantis from Paris")

    assert plan.goal.destination.name == "Atlantis"
    stops = list(plan.all_stops())
    assert len(stops) == 8
    assert all(stop.id.startswith("atlantis-") for stop in stops)


@pytest.mark.parametrize(
    "goal_text",
    ["", "   ", "asdf", "to", "from to", "999 days to ???", "Plan a trip", "🙂🙂🙂"],
)
def test_plan_trip_never_raises(goal_text: str) -> None:
    plan = plan_trip(goal_text)

    assert 1 <= len(plan.itinerary) <= 7
    assert plan.transport_options
    assert plan.selected_transport in plan.transport_options
