"""Orchestrates the end-to-end flow for generating a travel plan."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

from tripwright.agents import GoalInterpreter, ItineraryBuilder, StopCatalog
from tripwright.core.mapping import project_map
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.core.transport import (
    build_transport_options,
    pick_best_by_cost,
    pick_best_by_time,
)
from tripwright.schemas import (
    Goal,
    ItineraryDay,
    StopCandidates,
    TransportOption,
    TravelPlan,
)

_LOGGER = logging.getLogger(__name__)


def _log_stage(stage: str, duration: float) -> None:
    _LOGGER.info("%s stage completed in %.3fs", stage.capitalize(), duration)


def _run_intake(goal_text: str, settings: PlannerSettings) -> Goal:
    start = time.perf_counter()
    goal = GoalInterpreter(settings=settings).run(goal_text)
    _log_stage("intake", time.perf_counter() - start)
    return goal


def _run_transport(goal: Goal) -> Tuple[List[TransportOption], TransportOption, TransportOption]:
    start = time.perf_counter()
    options = build_transport_options(goal)
    best_by_cost = pick_best_by_cost(options)
    best_by_time = pick_best_by_time(options)
    _log_stage("transport", time.perf_counter() - start)
    return options, best_by_cost, best_by_time


def _run_catalog(goal: Goal, settings: PlannerSettings) -> StopCandidates:
    start = time.perf_counter()
    candidates = StopCatalog(settings=settings).run(goal.destination, goal.days, goal.theme)
    _log_stage("catalog", time.perf_counter() - start)
    return candidates


def _run_builder(
    goal: Goal, candidates: StopCandidates, settings: PlannerSettings
) -> List[ItineraryDay]:
    start = time.perf_counter()
    itinerary = ItineraryBuilder(settings=settings).build(goal, candidates)
    _log_stage("builder", time.perf_counter() - start)
    return itinerary


def plan_trip(goal_text: str, *, settings: Optional[PlannerSettings] = None) -> TravelPlan:
    """Turn a free-form goal into a complete :class:`TravelPlan`."""

    settings = settings or load_settings()
    pipeline_start = time.perf_counter()

    goal = _run_intake(goal_text, settings)
    _LOGGER.info(
        "Planning %d-day trip %s -> %s", goal.days, goal.origin.name, goal.destination.name
    )
    options, best_by_cost, best_by_time = _run_transport(goal)
    candidates = _run_catalog(goal, settings)
    itinerary = _run_builder(goal, candidates, settings)

    plan = TravelPlan(
        goal=goal,
        transport_options=options,
        best_by_cost=best_by_cost,
        best_by_time=best_by_time,
        selected_transport=best_by_cost,
        itinerary=itinerary,
        stop_pool=candidates.pool,
        alternates=candidates.alternates,
    )
    plan = plan.model_copy(update={"map": project_map(plan)})

    _LOGGER.info("Trip pipeline completed in %.3fs", time.perf_counter() - pipeline_start)
    return plan


__all__ = ["plan_trip"]
