"""Derives clock times and running costs for the stops of a day."""

from __future__ import annotations

from typing import List, Optional, Sequence

from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.core.transport import format_clock
from tripwright.schemas import Stop


class TimingEngine:
    """Stamps arrival/departure and cumulative cost onto an ordered day.

    The first stop starts at the configured day start, every following stop
    starts one transit buffer after the previous departure.
    """

    def __init__(self, *, settings: Optional[PlannerSettings] = None) -> None:
        self.settings = settings or load_settings()

    def stamp(self, stops: Sequence[Stop]) -> List[Stop]:
        elapsed = 0.0
        running = 0.0
        stamped: List[Stop] = []
        for index, stop in enumerate(stops):
            if index:
                elapsed += self.settings.transit_buffer_hours
            arrival = format_clock(self.settings.day_start, elapsed)
            elapsed += stop.duration_hours
            departure = format_clock(self.settings.day_start, elapsed)
            running = round(running + stop.cost_usd, 2)
            stamped.append(
                stop.model_copy(
                    update={
                        "arrival": arrival,
                        "departure": departure,
                        "running_cost_usd": running,
                    }
                )
            )
        return stamped


__all__ = ["TimingEngine"]
