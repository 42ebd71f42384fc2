"""Offline transport catalogue between an origin and a destination."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import List, Optional, Sequence

from tripwright.core.geo import distance_km
from tripwright.schemas import Goal, TransportMode, TransportOption

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModeProfile:
    """Static pricing, speed and emission assumptions for one mode."""

    mode: TransportMode
    speed_kmh: float
    overhead_hours: float
    base_fare_usd: float
    fare_per_km_usd: float
    carbon_kg_per_km: float
    departure: time
    min_km: float
    max_km: float
    blurb: str


MODE_PROFILES: Sequence[ModeProfile] = (
    ModeProfile(
        mode=TransportMode.FLIGHT,
        speed_kmh=780.0,
        overhead_hours=3.0,
        base_fare_usd=70.0,
        fare_per_km_usd=0.09,
        carbon_kg_per_km=0.15,
        departure=time(7, 45),
        min_km=300.0,
        max_km=16000.0,
        blurb="Fastest door-to-door once airport time is counted.",
    ),
    ModeProfile(
        mode=TransportMode.TRAIN,
        speed_kmh=140.0,
        overhead_hours=0.5,
        base_fare_usd=15.0,
        fare_per_km_usd=0.08,
        carbon_kg_per_km=0.035,
        departure=time(8, 30),
        min_km=0.0,
        max_km=2500.0,
        blurb="City-centre to city-centre with the lowest emissions.",
    ),
    ModeProfile(
        mode=TransportMode.BUS,
        speed_kmh=65.0,
        overhead_hours=0.25,
        base_fare_usd=8.0,
        fare_per_km_usd=0.045,
        carbon_kg_per_km=0.07,
        departure=time(6, 15),
        min_km=0.0,
        max_km=1500.0,
        blurb="Budget coach service with a few rest stops.",
    ),
    ModeProfile(
        mode=TransportMode.CAR,
        speed_kmh=80.0,
        overhead_hours=0.0,
        base_fare_usd=45.0,
        fare_per_km_usd=0.18,
        carbon_kg_per_km=0.17,
        departure=time(9, 0),
        min_km=0.0,
        max_km=1200.0,
        blurb="Flexible self-drive, rental and fuel included.",
    ),
)

# Beyond every profile's range a connecting long-haul itinerary is assumed.
_FALLBACK_PROFILE = ModeProfile(
    mode=TransportMode.FLIGHT,
    speed_kmh=700.0,
    overhead_hours=6.0,
    base_fare_usd=250.0,
    fare_per_km_usd=0.08,
    carbon_kg_per_km=0.16,
    departure=time(10, 30),
    min_km=0.0,
    max_km=float("inf"),
    blurb="Connecting itinerary via a regional hub.",
)


def format_clock(start: time, hours: float) -> str:
    """Return ``start + hours`` as ``HH:MM`` with a ``+Nd`` suffix past midnight."""

    anchor = datetime.combine(datetime.min.date(), start)
    moment = anchor + timedelta(minutes=round(hours * 60))
    offset = (moment.date() - anchor.date()).days
    label = moment.strftime("%H:%M")
    return f"{label} (+{offset}d)" if offset else label


def clock_minutes(label: str) -> int:
    """Minutes past midnight for a ``HH:MM`` label (day offsets included)."""

    clock, _, suffix = label.partition(" ")
    hours, minutes = (int(part) for part in clock.split(":"))
    days = 0
    if suffix:
        days = int(suffix.strip("()+d") or 0)
    return days * 24 * 60 + hours * 60 + minutes


def _build_option(profile: ModeProfile, km: float, origin: str, destination: str) -> TransportOption:
    duration = round(profile.overhead_hours + km / profile.speed_kmh, 2)
    duration = max(duration, 0.25)
    price = round(profile.base_fare_usd + km * profile.fare_per_km_usd, 2)
    carbon = round(km * profile.carbon_kg_per_km, 1)
    departure = profile.departure.strftime("%H:%M")
    arrival = format_clock(profile.departure, duration)
    summary = f"{profile.mode.value} {origin} → {destination}, about {km:,.0f} km. {profile.blurb}"
    return TransportOption(
        mode=profile.mode,
        price_usd=price,
        duration_hours=duration,
        carbon_kg=carbon,
        departure=departure,
        arrival=arrival,
        summary=summary,
    )


def build_transport_options(
    goal: Goal, *, profiles: Sequence[ModeProfile] = MODE_PROFILES
) -> List[TransportOption]:
    """Enumerate realistic options for the goal, never returning an empty list."""

    km = distance_km(goal.origin.coordinates, goal.destination.coordinates)
    options = [
        _build_option(profile, km, goal.origin.name, goal.destination.name)
        for profile in profiles
        if profile.min_km <= km <= profile.max_km
    ]
    if not options:
        _LOGGER.warning(
            "No transport mode covers %.0f km between %s and %s; synthesising a fallback",
            km,
            goal.origin.name,
            goal.destination.name,
        )
        options = [_build_option(_FALLBACK_PROFILE, km, goal.origin.name, goal.destination.name)]
    options.sort(key=lambda option: option.mode.rank)
    return options


def _tie_break(option: TransportOption) -> tuple[int, int]:
    return (clock_minutes(option.departure), option.mode.rank)


def pick_best_by_cost(options: Sequence[TransportOption]) -> Optional[TransportOption]:
    if not options:
        return None
    return min(options, key=lambda option: (option.price_usd, *_tie_break(option)))


def pick_best_by_time(options: Sequence[TransportOption]) -> Optional[TransportOption]:
    if not options:
        return None
    return min(options, key=lambda option: (option.duration_hours, *_tie_break(option)))


__all__ = [
    "MODE_PROFILES",
    "ModeProfile",
    "build_transport_options",
    "clock_minutes",
    "format_clock",
    "pick_best_by_cost",
    "pick_best_by_time",
]
