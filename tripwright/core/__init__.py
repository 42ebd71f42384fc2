"""Core utilities for Tripwright."""

from .evaluations import (
    category_diversity_score,
    daily_transfer_distance_km,
    days_over_ceiling,
    has_dense_orders,
    has_unique_stop_ids,
    is_consistent,
    timing_conflicts,
)
from .formatting import format_carbon, format_currency, format_duration, format_stop_timing
from .mapping import project_map

__all__ = [
    "category_diversity_score",
    "daily_transfer_distance_km",
    "days_over_ceiling",
    "format_carbon",
    "format_currency",
    "format_duration",
    "format_stop_timing",
    "has_dense_orders",
    "has_unique_stop_ids",
    "is_consistent",
    "project_map",
    "timing_conflicts",
]
