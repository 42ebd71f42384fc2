"""Agent that assembles the candidate stop pool for a destination."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from tripwright.core.geo import distance_km
from tripwright.core.places import known_pois, synthesise_pois
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.schemas import Place, Stop, StopCandidates

_LOGGER = logging.getLogger(__name__)

_CATALOG_CACHE: Dict[Tuple[object, ...], StopCandidates] = {}


def clear_catalog_cache() -> None:
    """Clear the in-memory cache of stop candidates."""

    _CATALOG_CACHE.clear()


def _to_stop(payload: Dict[str, object]) -> Stop:
    return Stop.model_validate(payload)


def _rank_alternates(stop: Stop, pool: List[Stop]) -> List[str]:
    others = [candidate for candidate in pool if candidate.id != stop.id]
    others.sort(
        key=lambda candidate: (
            candidate.category != stop.category,
            distance_km(stop.coordinates, candidate.coordinates),
            candidate.id,
        )
    )
    return [candidate.id for candidate in others]


class StopCatalog:
    """Chooses primary stops, a reserve for swaps and per-stop alternates."""

    def __init__(self, *, settings: Optional[PlannerSettings] = None) -> None:
        self.settings = settings or load_settings()

    def _cache_key(self, destination: Place, days: int, theme: Optional[str]) -> Tuple[object, ...]:
        return (
            destination.name.lower(),
            destination.latitude,
            destination.longitude,
            days,
            (theme or "").lower(),
            self.settings.stops_per_day,
        )

    def _collect(self, destination: Place, needed: int) -> List[Dict[str, object]]:
        payloads = known_pois(destination.name)
        if len(payloads) < needed:
            shortfall = needed - len(payloads)
            _LOGGER.info(
                "Synthesising %d stops around %s (catalogue has %d)",
                shortfall,
                destination.name,
                len(payloads),
            )
            payloads.extend(
                synthesise_pois(destination.name, destination.coordinates, shortfall)
            )
        return payloads

    def run(self, destination: Place, days: int, theme: Optional[str] = None) -> StopCandidates:
        """Return the :class:`StopCandidates` for ``days`` days at ``destination``."""

        days = max(1, days)
        key = self._cache_key(destination, days, theme)
        cached = _CATALOG_CACHE.get(key)
        if cached is not None:
            return cached.model_copy(deep=True)

        primary_count = days * self.settings.stops_per_day
        reserve_count = max(days, 3)
        payloads = self._collect(destination, primary_count + reserve_count)

        stops = [_to_stop(payload) for payload in payloads]
        if theme:
            wanted = theme.lower()
            indexed = sorted(
                enumerate(stops),
                key=lambda pair: (pair[1].category != wanted, pair[0]),
            )
            stops = [stop for _, stop in indexed]

        primary = stops[:primary_count]
        reserve = stops[primary_count:]
        alternates = {stop.id: _rank_alternates(stop, stops) for stop in stops}

        candidates = StopCandidates(primary=primary, reserve=reserve, alternates=alternates)
        _CATALOG_CACHE[key] = candidates.model_copy(deep=True)
        return candidates


__all__ = ["StopCatalog", "clear_catalog_cache"]
