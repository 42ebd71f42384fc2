"""Environment-driven tunables for the planning engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import time
from typing import Callable, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _env_value(name: str, default: T, parser: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parser(raw.strip())
    except ValueError:
        _LOGGER.warning("Ignoring invalid %s=%r; using %r", name, raw, default)
        return default


def _parse_clock(value: str) -> time:
    return time.fromisoformat(value)


def _parse_positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise ValueError(value)
    return number


def _parse_non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise ValueError(value)
    return number


def _parse_positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError(value)
    return number


@dataclass(frozen=True)
class PlannerSettings:
    """Tunables shared by the catalogs, builder and timing engine."""

    day_start: time = time(9, 0)
    transit_buffer_hours: float = 0.5
    day_ceiling_hours: float = 10.0
    day_cost_ceiling_usd: float = 250.0
    stops_per_day: int = 4
    default_days: int = 2
    max_days: int = 7
    min_stop_hours: float = 1.0
    max_stop_hours: float = 4.0
    duration_step_hours: float = 0.5


def load_settings() -> PlannerSettings:
    """Read the current settings from the environment."""

    defaults = PlannerSettings()
    max_days = _env_value("TRIPWRIGHT_MAX_DAYS", defaults.max_days, _parse_positive_int)
    default_days = _env_value(
        "TRIPWRIGHT_DEFAULT_DAYS", defaults.default_days, _parse_positive_int
    )
    return PlannerSettings(
        day_start=_env_value("TRIPWRIGHT_DAY_START", defaults.day_start, _parse_clock),
        transit_buffer_hours=_env_value(
            "TRIPWRIGHT_TRANSIT_BUFFER_HOURS",
            defaults.transit_buffer_hours,
            _parse_non_negative_float,
        ),
        day_ceiling_hours=_env_value(
            "TRIPWRIGHT_DAY_CEILING_HOURS",
            defaults.day_ceiling_hours,
            _parse_positive_float,
        ),
        day_cost_ceiling_usd=_env_value(
            "TRIPWRIGHT_DAY_COST_CEILING_USD",
            defaults.day_cost_ceiling_usd,
            _parse_positive_float,
        ),
        stops_per_day=_env_value(
            "TRIPWRIGHT_STOPS_PER_DAY", defaults.stops_per_day, _parse_positive_int
        ),
        default_days=min(default_days, max_days),
        max_days=max_days,
    )


__all__ = ["PlannerSettings", "load_settings"]
