"""Human-readable renderings of plan values."""

from __future__ import annotations

from tripwright.schemas import Stop


def format_currency(usd: float) -> str:
    return f"${usd:,.0f}"


def format_duration(hours: float) -> str:
    """Render fractional hours as ``2h 30m``."""

    total_minutes = max(0, int(round(hours * 60)))
    whole_hours, minutes = divmod(total_minutes, 60)
    if whole_hours and minutes:
        return f"{whole_hours}h {minutes}m"
    if whole_hours:
        return f"{whole_hours}h"
    return f"{minutes}m"


def format_carbon(kg: float) -> str:
    return f"{kg:,.0f} kg CO₂e"


def format_stop_timing(stop: Stop) -> str:
    """Render the stop window as ``09:00 – 11:30 · 2h 30m``."""

    duration = format_duration(stop.duration_hours)
    if not stop.arrival or not stop.departure:
        return duration
    return f"{stop.arrival} – {stop.departure} · {duration}"


__all__ = ["format_carbon", "format_currency", "format_duration", "format_stop_timing"]
