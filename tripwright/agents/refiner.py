"""Incremental edits applied to an existing :class:`TravelPlan`."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Union

from tripwright.agents import PlanEditError
from tripwright.agents.planner import ItineraryBuilder
from tripwright.core.geo import distance_km
from tripwright.core.mapping import project_map
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.schemas import ItineraryDay, Stop, TransportMode, TravelPlan

_LOGGER = logging.getLogger(__name__)


class EditEngine:
    """Applies single edits and re-derives timings, summaries and map geometry.

    Only the edited day is rebuilt. Every edit returns a new plan, the input
    plan is never modified.
    """

    def __init__(
        self,
        *,
        settings: Optional[PlannerSettings] = None,
        builder: Optional[ItineraryBuilder] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.builder = builder or ItineraryBuilder(settings=self.settings)

    @staticmethod
    def _day(plan: TravelPlan, day_index: int) -> ItineraryDay:
        if isinstance(day_index, bool) or not isinstance(day_index, int):
            raise PlanEditError(f"Day index must be an integer, got {day_index!r}")
        if not 0 <= day_index < len(plan.itinerary):
            raise PlanEditError(f"No day at index {day_index}")
        return plan.itinerary[day_index]

    @staticmethod
    def _position(day: ItineraryDay, stop_id: str) -> int:
        for index, stop in enumerate(day.stops):
            if stop.id == stop_id:
                return index
        raise PlanEditError(f"Stop {stop_id!r} is not scheduled on day {day.day}")

    @staticmethod
    def _with_day(plan: TravelPlan, day_index: int, day: ItineraryDay) -> TravelPlan:
        itinerary = list(plan.itinerary)
        itinerary[day_index] = day
        updated = plan.model_copy(update={"itinerary": itinerary})
        return updated.model_copy(update={"map": project_map(updated)})

    def _snap_hours(self, hours: float) -> float:
        try:
            value = float(hours)
        except (TypeError, ValueError) as exc:
            raise PlanEditError(f"Duration must be a number, got {hours!r}") from exc
        if not math.isfinite(value):
            raise PlanEditError(f"Duration must be finite, got {hours!r}")
        step = self.settings.duration_step_hours
        snapped = round(value / step) * step
        return min(self.settings.max_stop_hours, max(self.settings.min_stop_hours, snapped))

    def _pick_replacement(self, plan: TravelPlan, stop: Stop) -> Stop:
        scheduled = plan.scheduled_ids()
        pool = {candidate.id: candidate for candidate in plan.stop_pool}
        for alternate_id in plan.alternates.get(stop.id, []):
            candidate = pool.get(alternate_id)
            if candidate is not None and alternate_id not in scheduled:
                return candidate
        unscheduled = [candidate for candidate in plan.stop_pool if candidate.id not in scheduled]
        if not unscheduled:
            raise PlanEditError(f"No unscheduled alternative for {stop.id!r}")
        return min(
            unscheduled,
            key=lambda candidate: (distance_km(stop.coordinates, candidate.coordinates), candidate.id),
        )

    def change_transport_mode(self, plan: TravelPlan, mode: Union[TransportMode, str]) -> TravelPlan:
        try:
            wanted = TransportMode(mode)
        except ValueError as exc:
            raise PlanEditError(f"Unknown transport mode {mode!r}") from exc
        option = plan.option_for(wanted)
        if option is None:
            raise PlanEditError(f"{wanted.value} is not offered for this trip")
        if option == plan.selected_transport:
            return plan
        return plan.model_copy(update={"selected_transport": option})

    def swap_stop(self, plan: TravelPlan, day_index: int, stop_id: str) -> TravelPlan:
        day = self._day(plan, day_index)
        position = self._position(day, stop_id)
        replacement = self._pick_replacement(plan, day.stops[position])
        stops: List[Stop] = list(day.stops)
        stops[position] = replacement
        _LOGGER.info("Swapped %s for %s on day %d", stop_id, replacement.id, day.day)
        repaired = self.builder.repair_day(day, stops, pinned_id=replacement.id)
        return self._with_day(plan, day_index, repaired)

    def remove_stop(self, plan: TravelPlan, day_index: int, stop_id: str) -> TravelPlan:
        day = self._day(plan, day_index)
        position = self._position(day, stop_id)
        stops = [stop for index, stop in enumerate(day.stops) if index != position]
        repaired = self.builder.repair_day(day, stops)
        return self._with_day(plan, day_index, repaired)

    def adjust_duration(
        self, plan: TravelPlan, day_index: int, stop_id: str, hours: float
    ) -> TravelPlan:
        day = self._day(plan, day_index)
        position = self._position(day, stop_id)
        snapped = self._snap_hours(hours)
        stops: List[Stop] = list(day.stops)
        stops[position] = stops[position].model_copy(update={"duration_hours": snapped})
        repaired = self.builder.repair_day(day, stops, pinned_id=stop_id)
        return self._with_day(plan, day_index, repaired)


def _fail_soft(plan: TravelPlan, action: str, exc: PlanEditError) -> TravelPlan:
    _LOGGER.info("Ignoring %s edit: %s", action, exc)
    return plan


def change_transport_mode(
    plan: TravelPlan,
    mode: Union[TransportMode, str],
    *,
    settings: Optional[PlannerSettings] = None,
) -> TravelPlan:
    """Select the option for ``mode``; the itinerary and map are left untouched."""

    try:
        return EditEngine(settings=settings).change_transport_mode(plan, mode)
    except PlanEditError as exc:
        return _fail_soft(plan, "transport", exc)


def swap_stop_with_alternative(
    plan: TravelPlan,
    day_index: int,
    stop_id: str,
    *,
    settings: Optional[PlannerSettings] = None,
) -> TravelPlan:
    """Replace a stop with its first unscheduled alternate, keeping its slot.

    Pass the ``settings`` the plan was built with so the day is re-timed the
    same way as the rest of the itinerary.
    """

    try:
        return EditEngine(settings=settings).swap_stop(plan, day_index, stop_id)
    except PlanEditError as exc:
        return _fail_soft(plan, "swap", exc)


def update_itinerary_after_removal(
    plan: TravelPlan,
    day_index: int,
    stop_id: str,
    *,
    settings: Optional[PlannerSettings] = None,
) -> TravelPlan:
    """Drop a stop and renumber the rest of its day. Empty days are kept."""

    try:
        return EditEngine(settings=settings).remove_stop(plan, day_index, stop_id)
    except PlanEditError as exc:
        return _fail_soft(plan, "removal", exc)


def adjust_stop_duration(
    plan: TravelPlan,
    day_index: int,
    stop_id: str,
    hours: float,
    *,
    settings: Optional[PlannerSettings] = None,
) -> TravelPlan:
    """Set a stop's duration, snapped to half hours within one to four hours."""

    try:
        return EditEngine(settings=settings).adjust_duration(plan, day_index, stop_id, hours)
    except PlanEditError as exc:
        return _fail_soft(plan, "duration", exc)


__all__ = [
    "EditEngine",
    "adjust_stop_duration",
    "change_transport_mode",
    "swap_stop_with_alternative",
    "update_itinerary_after_removal",
]
