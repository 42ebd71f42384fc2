"""Workflow helpers for Tripwright."""

from .trip_pipeline import plan_trip

__all__ = ["plan_trip"]
