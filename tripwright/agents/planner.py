"""Agent that clusters candidate stops into balanced, sequenced days."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from tripwright.core.formatting import format_currency, format_duration
from tripwright.core.geo import bearing_degrees, centroid, distance_km
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.core.timing import TimingEngine
from tripwright.schemas import Goal, ItineraryDay, Stop, StopCandidates

_LOGGER = logging.getLogger(__name__)

DAY_PALETTE: Tuple[str, ...] = (
    "#34d399",
    "#38bdf8",
    "#f97316",
    "#a855f7",
    "#facc15",
    "#f472b6",
)

_CATEGORY_TITLES = {
    "culture": "Heritage & temples",
    "food": "Markets & tasting",
    "nature": "Parks & open air",
    "nightlife": "After dark",
    "art": "Galleries & design",
    "shopping": "Shops & bazaars",
    "landmark": "Icons & viewpoints",
}

_DAY_LEADS: Tuple[str, ...] = (
    "Settle in",
    "Go deeper",
    "Wander further",
    "Mix it up",
    "Slow down",
    "Find the hidden corners",
    "Take last looks",
)


def day_color(day_number: int) -> str:
    return DAY_PALETTE[(day_number - 1) % len(DAY_PALETTE)]


def _dominant_category(stops: Sequence[Stop]) -> Optional[str]:
    if not stops:
        return None
    counts = Counter(stop.category for stop in stops)
    best = max(counts.values())
    for stop in stops:
        if counts[stop.category] == best:
            return stop.category
    return None


def _balanced_bands(stops: Sequence[Stop], days: int) -> List[List[Stop]]:
    base, extra = divmod(len(stops), days)
    bands: List[List[Stop]] = []
    cursor = 0
    for index in range(days):
        size = base + (1 if index < extra else 0)
        bands.append(list(stops[cursor : cursor + size]))
        cursor += size
    return bands


def _nearest_neighbour_path(start: Tuple[float, float], stops: Sequence[Stop]) -> List[Stop]:
    remaining = list(stops)
    path: List[Stop] = []
    position = start
    while remaining:
        nearest = min(
            remaining,
            key=lambda stop: (distance_km(position, stop.coordinates), stop.id),
        )
        remaining.remove(nearest)
        path.append(nearest)
        position = nearest.coordinates
    return path


def _snap_down(value: float, step: float) -> float:
    return (value // step) * step


def _snap_up(value: float, step: float) -> float:
    return math.ceil(round(value / step, 6)) * step


class ItineraryBuilder:
    """Assigns primary stops to days and keeps single days consistent after edits.

    Clustering uses angular bands around the primary stops' centroid and each
    band is walked greedily from the destination. The result is a heuristic
    open path per day, not an optimal tour.
    """

    def __init__(
        self,
        *,
        settings: Optional[PlannerSettings] = None,
        timing: Optional[TimingEngine] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.timing = timing or TimingEngine(settings=self.settings)

    def _within_ceilings(self, accepted: Sequence[Stop], candidate: Stop) -> bool:
        hours = sum(stop.duration_hours for stop in accepted) + candidate.duration_hours
        cost = sum(stop.cost_usd for stop in accepted) + candidate.cost_usd
        return hours <= self.settings.day_ceiling_hours and cost <= self.settings.day_cost_ceiling_usd

    def _cost_warnings(self, stops: Sequence[Stop]) -> List[str]:
        cost = sum(stop.cost_usd for stop in stops)
        if cost <= self.settings.day_cost_ceiling_usd:
            return []
        return [
            f"Estimated spend of {format_currency(cost)} is above the "
            f"{format_currency(self.settings.day_cost_ceiling_usd)} daily budget."
        ]

    def finalize_day(
        self, day_number: int, stops: Sequence[Stop], warnings: Sequence[str] = ()
    ) -> ItineraryDay:
        """Renumber, time-stamp and label the stops of one day."""

        ordered = [stop.model_copy(update={"order": index}) for index, stop in enumerate(stops, start=1)]
        stamped = self.timing.stamp(ordered)
        dominant = _dominant_category(stamped)
        label = _CATEGORY_TITLES.get(dominant, dominant.capitalize()) if dominant else "Free day"
        lead = _DAY_LEADS[(day_number - 1) % len(_DAY_LEADS)]
        hours = sum(stop.duration_hours for stop in stamped)
        cost = sum(stop.cost_usd for stop in stamped)
        if stamped:
            noun = "stop" if len(stamped) == 1 else "stops"
            summary = (
                f"{lead} with {len(stamped)} {noun}, {format_duration(hours)} of visits "
                f"and about {format_currency(cost)} in entry costs."
            )
        else:
            summary = "No stops scheduled. Swap one in or enjoy a free day."
        return ItineraryDay(
            day=day_number,
            title=f"Day {day_number}: {label}",
            summary=summary,
            color=day_color(day_number),
            stops=stamped,
            warnings=[*warnings, *self._cost_warnings(stamped)],
        )

    def build(self, goal: Goal, candidates: StopCandidates) -> List[ItineraryDay]:
        """Return ``goal.days`` sequenced days built from ``candidates.primary``."""

        days = goal.days
        primaries = list(candidates.primary)
        center = centroid(stop.coordinates for stop in primaries) or goal.destination.coordinates
        by_angle = sorted(
            primaries,
            key=lambda stop: (bearing_degrees(center, stop.coordinates), stop.id),
        )

        itinerary: List[ItineraryDay] = []
        for index, band in enumerate(_balanced_bands(by_angle, days)):
            accepted: List[Stop] = []
            for stop in _nearest_neighbour_path(goal.destination.coordinates, band):
                if not self._within_ceilings(accepted, stop):
                    _LOGGER.info(
                        "Skipping %s on day %d; it would exceed the daily ceilings",
                        stop.id,
                        index + 1,
                    )
                    continue
                accepted.append(stop)
            itinerary.append(self.finalize_day(index + 1, accepted))
        return itinerary

    def _enforce_ceiling(
        self, stops: List[Stop], pinned_id: Optional[str]
    ) -> Tuple[List[Stop], List[str]]:
        ceiling = self.settings.day_ceiling_hours
        step = self.settings.duration_step_hours
        floor = self.settings.min_stop_hours
        warnings: List[str] = []

        def total() -> float:
            return sum(stop.duration_hours for stop in stops)

        if total() <= ceiling:
            return stops, warnings

        for index in reversed(range(len(stops))):
            stop = stops[index]
            if stop.id == pinned_id or stop.duration_hours <= floor:
                continue
            overflow = total() - ceiling
            if overflow <= 0:
                break
            cut = min(stop.duration_hours - floor, _snap_up(overflow, step))
            reduced = stop.duration_hours - cut
            stops[index] = stop.model_copy(update={"duration_hours": reduced})
            warnings.append(
                f"Shortened {stop.name} from {format_duration(stop.duration_hours)} to "
                f"{format_duration(reduced)} to keep the day within {format_duration(ceiling)}."
            )

        def drop_last(candidates: List[int]) -> None:
            dropped = stops.pop(candidates[-1])
            warnings.append(
                f"Removed {dropped.name} to keep the day within {format_duration(ceiling)}; "
                "it is back in the swap pool."
            )

        pinned_index = next(
            (index for index, stop in enumerate(stops) if stop.id == pinned_id), -1
        )
        # Stops ahead of the pinned one stay so it keeps its slot.
        while total() > ceiling:
            trailing = list(range(pinned_index + 1, len(stops)))
            if not trailing:
                break
            drop_last(trailing)

        if pinned_index >= 0 and total() > ceiling:
            pinned = stops[pinned_index]
            room = _snap_down(ceiling - (total() - pinned.duration_hours), step)
            if room >= floor:
                stops[pinned_index] = pinned.model_copy(update={"duration_hours": room})
                warnings.append(
                    f"Capped {pinned.name} at {format_duration(room)} to keep the day within "
                    f"{format_duration(ceiling)}."
                )

        while total() > ceiling:
            removable = [index for index, stop in enumerate(stops) if stop.id != pinned_id]
            if not removable:
                break
            drop_last(removable)

        if total() > ceiling and stops:
            pinned = stops[0]
            capped = max(0.5, _snap_down(ceiling, step))
            stops[0] = pinned.model_copy(update={"duration_hours": capped})
            warnings.append(
                f"Capped {pinned.name} at {format_duration(capped)}, the longest a day allows."
            )

        return stops, warnings

    def repair_day(
        self, day: ItineraryDay, stops: Sequence[Stop], *, pinned_id: Optional[str] = None
    ) -> ItineraryDay:
        """Rebuild ``day`` from ``stops`` without touching any other day.

        Relative order is kept, orders are renumbered densely and the duration
        ceiling is enforced, sparing ``pinned_id`` for as long as possible.
        """

        kept, warnings = self._enforce_ceiling(list(stops), pinned_id)
        for warning in warnings:
            _LOGGER.info("Day %d: %s", day.day, warning)
        return self.finalize_day(day.day, kept, warnings)


__all__ = ["DAY_PALETTE", "ItineraryBuilder", "day_color"]
