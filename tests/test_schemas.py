"""Unit tests for schema helpers and validators."""

import pytest
from pydantic import ValidationError

from tripwright.schemas import Goal, ItineraryDay, Place, Stop, TransportMode, TransportOption, TravelPlan


def _option(mode: TransportMode = TransportMode.TRAIN) -> TransportOption:
    return TransportOption(
        mode=mode,
        price_usd=40.0,
        duration_hours=3.0,
        carbon_kg=12.0,
        departure="08:30",
        arrival="11:30",
    )


def _goal() -> Goal:
    return Goal(
        origin=Place(name="London", latitude=51.5074, longitude=-0.1278),
        destination=Place(name="Paris", latitude=48.8566, longitude=2.3522),
        days=2,
    )


def test_travel_plan_requires_contiguous_days() -> None:
    option = _option()

    with pytest.raises(ValidationError):
        TravelPlan(
            goal=_goal(),
            transport_options=[option],
            best_by_cost=option,
            best_by_time=option,
            selected_transport=option,
            itinerary=[ItineraryDay(day=1), ItineraryDay(day=3)],
        )


def test_travel_plan_requires_at_least_one_option() -> None:
    option = _option()

    with pytest.raises(ValidationError):
        TravelPlan(
            goal=_goal(),
            transport_options=[],
            best_by_cost=option,
            best_by_time=option,
            selected_transport=option,
        )


def test_models_are_frozen() -> None:
    stop = Stop(id="a", name="A", category="art", duration_hours=2, latitude=0, longitude=0)

    with pytest.raises(ValidationError):
        stop.duration_hours = 3

    updated = stop.model_copy(update={"duration_hours": 3})
    assert stop.duration_hours == 2
    assert updated.duration_hours == 3


def test_transport_mode_lookup_is_case_insensitive() -> None:
    assert TransportMode("flight") is TransportMode.FLIGHT
    assert TransportMode(" Bus ") is TransportMode.BUS
    with pytest.raises(ValueError):
        TransportMode("Teleport")


def test_transport_mode_rank_follows_declaration_order() -> None:
    assert [mode.rank for mode in TransportMode] == [0, 1, 2, 3]


def test_itinerary_day_totals_and_lookup() -> None:
    day = ItineraryDay(
        day=1,
        stops=[
            Stop(id="a", name="A", category="art", duration_hours=2, cost_usd=10, latitude=0, longitude=0),
            Stop(id="b", name="B", category="food", duration_hours=1.5, cost_usd=5, latitude=0, longitude=0),
        ],
    )

    assert day.total_hours == 3.5
    assert day.total_cost_usd == 15
    assert day.find_stop("b").name == "B"
    assert day.find_stop("missing") is None
