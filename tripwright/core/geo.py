"""Geographic helpers and the offline gazetteer."""

from __future__ import annotations

import re
import zlib
from math import asin, atan2, cos, degrees, radians, sin, sqrt
from typing import Dict, Iterable, Optional, Sequence, Tuple

from tripwright.schemas import Place

EARTH_RADIUS_KM = 6371.0

# name -> (latitude, longitude, country)
_GAZETTEER: Dict[str, Tuple[float, float, str]] = {
    "Tokyo": (35.6762, 139.6503, "Japan"),
    "Kyoto": (35.0116, 135.7681, "Japan"),
    "Osaka": (34.6937, 135.5023, "Japan"),
    "New Delhi": (28.6139, 77.2090, "India"),
    "Mumbai": (19.0760, 72.8777, "India"),
    "Jaipur": (26.9124, 75.7873, "India"),
    "Paris": (48.8566, 2.3522, "France"),
    "Lyon": (45.7640, 4.8357, "France"),
    "London": (51.5074, -0.1278, "United Kingdom"),
    "Edinburgh": (55.9533, -3.1883, "United Kingdom"),
    "Amsterdam": (52.3676, 4.9041, "Netherlands"),
    "Berlin": (52.5200, 13.4050, "Germany"),
    "Rome": (41.9028, 12.4964, "Italy"),
    "Barcelona": (41.3874, 2.1686, "Spain"),
    "New York": (40.7128, -74.0060, "United States"),
    "Boston": (42.3601, -71.0589, "United States"),
    "Washington": (38.9072, -77.0369, "United States"),
    "San Francisco": (37.7749, -122.4194, "United States"),
    "Los Angeles": (34.0522, -118.2437, "United States"),
    "Singapore": (1.3521, 103.8198, "Singapore"),
    "Bangkok": (13.7563, 100.5018, "Thailand"),
    "Dubai": (25.2048, 55.2708, "United Arab Emirates"),
    "Sydney": (-33.8688, 151.2093, "Australia"),
    "Seoul": (37.5665, 126.9780, "South Korea"),
}

_ALIASES: Dict[str, str] = {
    "delhi": "New Delhi",
    "nyc": "New York",
    "new york city": "New York",
    "manhattan": "New York",
    "sf": "San Francisco",
    "la": "Los Angeles",
    "washington dc": "Washington",
    "washington d.c.": "Washington",
    "bombay": "Mumbai",
}


def _normalise_name(name: str) -> str:
    return re.sub(r"\s+", " ", name.strip().lower())


def canonical_name(name: str) -> Optional[str]:
    """Return the gazetteer spelling of ``name`` or ``None`` when unknown."""

    key = _normalise_name(name)
    if not key:
        return None
    if key in _ALIASES:
        return _ALIASES[key]
    for known in _GAZETTEER:
        if known.lower() == key:
            return known
    return None


def _synthetic_coordinates(name: str) -> Tuple[float, float]:
    checksum = zlib.crc32(_normalise_name(name).encode("utf-8"))
    latitude = -50.0 + (checksum % 11000) / 100.0
    longitude = -180.0 + ((checksum // 11000) % 36000) / 100.0
    return (round(latitude, 4), round(longitude, 4))


def resolve_place(name: str) -> Place:
    """Resolve a free-text place name, synthesising coordinates when unknown."""

    known = canonical_name(name)
    if known is not None:
        latitude, longitude, country = _GAZETTEER[known]
        return Place(name=known, latitude=latitude, longitude=longitude, country=country)
    cleaned = re.sub(r"\s+", " ", name.strip()).title() or "Unknown"
    latitude, longitude = _synthetic_coordinates(cleaned)
    return Place(name=cleaned, latitude=latitude, longitude=longitude)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the spherical distance in kilometres between two coordinates."""

    d_lat = radians(lat2 - lat1)
    d_lon = radians(lon2 - lon1)
    a = sin(d_lat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(d_lon / 2) ** 2
    c = 2 * asin(sqrt(min(1.0, a)))
    return EARTH_RADIUS_KM * c


def distance_km(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return haversine_km(a[0], a[1], b[0], b[1])


def bearing_degrees(origin: Tuple[float, float], target: Tuple[float, float]) -> float:
    """Initial compass bearing from ``origin`` to ``target`` in ``[0, 360)``."""

    lat1, lat2 = radians(origin[0]), radians(target[0])
    d_lon = radians(target[1] - origin[1])
    x = sin(d_lon) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(d_lon)
    return (degrees(atan2(x, y)) + 360.0) % 360.0


def centroid(points: Iterable[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
    collected: Sequence[Tuple[float, float]] = list(points)
    if not collected:
        return None
    lat = sum(point[0] for point in collected) / len(collected)
    lon = sum(point[1] for point in collected) / len(collected)
    return (lat, lon)


def offset_point(
    origin: Tuple[float, float], bearing: float, distance: float
) -> Tuple[float, float]:
    """Move ``distance`` kilometres from ``origin`` along ``bearing`` degrees."""

    angular = distance / EARTH_RADIUS_KM
    lat1 = radians(origin[0])
    lon1 = radians(origin[1])
    theta = radians(bearing)
    lat2 = asin(sin(lat1) * cos(angular) + cos(lat1) * sin(angular) * cos(theta))
    lon2 = lon1 + atan2(
        sin(theta) * sin(angular) * cos(lat1),
        cos(angular) - sin(lat1) * sin(lat2),
    )
    return (round(degrees(lat2), 6), round((degrees(lon2) + 540.0) % 360.0 - 180.0, 6))


__all__ = [
    "bearing_degrees",
    "canonical_name",
    "centroid",
    "distance_km",
    "haversine_km",
    "offset_point",
    "resolve_place",
]
