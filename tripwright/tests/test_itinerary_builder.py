from __future__ import annotations

from datetime import time

import pytest

from tripwright.agents.planner import DAY_PALETTE, ItineraryBuilder
from tripwright.agents.researcher import StopCatalog, clear_catalog_cache
from tripwright.core.geo import resolve_place
from tripwright.core.settings import PlannerSettings
from tripwright.core.timing import TimingEngine
from tripwright.schemas import Goal, ItineraryDay, Stop


@pytest.fixture(autouse=True)
def _reset_catalog_cache():
    clear_catalog_cache()
    yield
    clear_catalog_cache()


def _stop(stop_id: str, hours: float, cost: float = 0.0) -> Stop:
    return Stop(
        id=stop_id,
        name=stop_id.title(),
        category="culture",
        duration_hours=hours,
        cost_usd=cost,
        latitude=35.0,
        longitude=139.0,
    )


def _goal(destination: str, days: int) -> Goal:
    return Goal(origin=resolve_place("New Delhi"), destination=resolve_place(destination), days=days)


def test_timing_engine_stamps_clock_times_and_running_cost() -> None:
    engine = TimingEngine(settings=PlannerSettings())

    stamped = engine.stamp([_stop("a", 2.0, 10.0), _stop("b", 1.5, 5.0)])

    assert [(stop.arrival, stop.departure) for stop in stamped] == [
        ("09:00", "11:00"),
        ("11:30", "13:00"),
    ]
    assert [stop.running_cost_usd for stop in stamped] == [10.0, 15.0]


def test_timing_engine_honours_custom_day_start_and_buffer() -> None:
    engine = TimingEngine(settings=PlannerSettings(day_start=time(8, 0), transit_buffer_hours=1.0))

    stamped = engine.stamp([_stop("a", 1.0), _stop("b", 1.0)])

    assert stamped[1].arrival == "10:00"


def test_build_balances_primaries_across_days() -> None:
    settings = PlannerSettings()
    goal = _goal("Tokyo", 2)
    candidates = StopCatalog(settings=settings).run(goal.destination, goal.days)

    itinerary = ItineraryBuilder(settings=settings).build(goal, candidates)

    assert [day.day for day in itinerary] == [1, 2]
    assert [len(day.stops) for day in itinerary] == [4, 4]
    assert [day.color for day in itinerary] == list(DAY_PALETTE[:2])
    scheduled = [stop.id for day in itinerary for stop in day.stops]
    assert sorted(scheduled) == sorted(stop.id for stop in candidates.primary)
    for day in itinerary:
        assert [stop.order for stop in day.stops] == list(range(1, len(day.stops) + 1))
        assert day.stops[0].arrival == "09:00"
        assert day.title.startswith(f"Day {day.day}: ")
        assert day.summary
        assert day.warnings == []


def test_build_skips_stops_over_the_cost_ceiling() -> None:
    settings = PlannerSettings(day_cost_ceiling_usd=50.0)
    goal = _goal("Tokyo", 2)
    candidates = StopCatalog(settings=settings).run(goal.destination, goal.days)

    itinerary = ItineraryBuilder(settings=settings).build(goal, candidates)

    assert all(day.total_cost_usd <= 50.0 for day in itinerary)
    assert sum(len(day.stops) for day in itinerary) < len(candidates.primary)


def test_build_is_deterministic() -> None:
    settings = PlannerSettings()
    goal = _goal("Paris", 3)
    candidates = StopCatalog(settings=settings).run(goal.destination, goal.days)
    builder = ItineraryBuilder(settings=settings)

    assert builder.build(goal, candidates) == builder.build(goal, candidates)


def test_repair_day_trims_other_stops_latest_first() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings(day_ceiling_hours=10.0))
    day = ItineraryDay(day=1)

    repaired = builder.repair_day(
        day, [_stop("pinned", 4.0), _stop("middle", 3.0), _stop("last", 3.5)], pinned_id="pinned"
    )

    assert [stop.duration_hours for stop in repaired.stops] == [4.0, 3.0, 3.0]
    assert repaired.total_hours <= 10.0
    assert len(repaired.warnings) == 1
    assert "Last" in repaired.warnings[0]


def test_repair_day_removes_trailing_stops_when_trimming_is_not_enough() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings(day_ceiling_hours=5.0))
    day = ItineraryDay(day=2)

    repaired = builder.repair_day(
        day, [_stop("pinned", 4.0), _stop("middle", 2.0), _stop("last", 2.0)], pinned_id="pinned"
    )

    assert [stop.id for stop in repaired.stops] == ["pinned", "middle"]
    assert [stop.duration_hours for stop in repaired.stops] == [4.0, 1.0]
    assert [stop.order for stop in repaired.stops] == [1, 2]
    assert any("Removed Last" in warning for warning in repaired.warnings)
    assert repaired.day == 2


def test_repair_day_warns_about_cost_overflow() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings(day_cost_ceiling_usd=100.0))

    repaired = builder.repair_day(ItineraryDay(day=1), [_stop("a", 2.0, 80.0), _stop("b", 2.0, 40.0)])

    assert len(repaired.stops) == 2
    assert repaired.warnings == ["Estimated spend of $120 is above the $100 daily budget."]


def test_repair_day_with_no_stops_keeps_the_day() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings())

    repaired = builder.repair_day(ItineraryDay(day=3), [])

    assert repaired.day == 3
    assert repaired.stops == []
    assert repaired.title == "Day 3: Free day"


def test_repair_day_keeps_a_trailing_pinned_stop_in_its_slot() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings(day_ceiling_hours=3.0))

    repaired = builder.repair_day(
        ItineraryDay(day=1), [_stop("first", 1.5), _stop("replacement", 3.0)], pinned_id="replacement"
    )

    assert [stop.id for stop in repaired.stops] == ["first", "replacement"]
    assert [stop.order for stop in repaired.stops] == [1, 2]
    assert [stop.duration_hours for stop in repaired.stops] == [1.0, 2.0]
    assert repaired.warnings[-1] == "Capped Replacement at 2h to keep the day within 3h."


def test_repair_day_drops_stops_after_the_pinned_one_first() -> None:
    builder = ItineraryBuilder(settings=PlannerSettings(day_ceiling_hours=5.0))

    repaired = builder.repair_day(
        ItineraryDay(day=1),
        [_stop("early", 1.0), _stop("pinned", 4.0), _stop("late", 1.0)],
        pinned_id="pinned",
    )

    assert [stop.id for stop in repaired.stops] == ["early", "pinned"]
    assert repaired.stops[1].order == 2
    assert any("Removed Late" in warning for warning in repaired.warnings)
