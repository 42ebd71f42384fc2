from __future__ import annotations

import pytest

from tripwright import change_transport_mode, plan_trip, project_map
from tripwright.agents import clear_catalog_cache
from tripwright.core.mapping import TRANSPORT_LEG_COLOR
from tripwright.schemas import TransportMode


@pytest.fixture(autouse=True)
def _reset_catalog_cache():
    clear_catalog_cache()
    yield
    clear_catalog_cache()


def test_projection_is_pure_and_matches_plan() -> None:
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")

    assert project_map(plan) == project_map(plan) == plan.map


def test_nodes_and_legs_follow_the_itinerary() -> None:
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")
    stops = list(plan.all_stops())

    node_types = [node.type for node in plan.map.nodes]
    assert node_types.count("origin") == 1
    assert node_types.count("destination") == 1
    assert node_types.count("stop") == len(stops)

    expected_legs = 1 + sum(max(len(day.stops) - 1, 0) for day in plan.itinerary)
    assert len(plan.map.legs) == expected_legs

    stop_nodes = {node.id: node for node in plan.map.nodes if node.type == "stop"}
    for day in plan.itinerary:
        for stop in day.stops:
            assert stop_nodes[stop.id].day == day.day
            assert stop_nodes[stop.id].order == stop.order


def test_transport_leg_is_mode_independent() -> None:
    plan = plan_trip("Plan a 2-day trip to Paris from London")
    transport_leg = plan.map.legs[0]

    assert transport_leg.id == "transport"
    assert transport_leg.color == TRANSPORT_LEG_COLOR
    assert transport_leg.label == "London → Paris"
    assert transport_leg.start == plan.goal.origin.coordinates
    assert transport_leg.end == plan.goal.destination.coordinates

    switched = change_transport_mode(plan, TransportMode.FLIGHT)
    assert project_map(switched) == plan.map


def test_stop_legs_use_day_colours() -> None:
    plan = plan_trip("Plan a 2-day trip to Tokyo from New Delhi")
    colours = {day.day: day.color for day in plan.itinerary}

    for leg in plan.map.legs[1:]:
        day_number = int(leg.id[1:].split("-")[0])
        assert leg.color == colours[day_number]
