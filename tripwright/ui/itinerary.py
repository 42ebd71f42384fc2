"""UI helpers for reviewing and editing the day-by-day itinerary."""

from __future__ import annotations

import logging

import streamlit as st

from tripwright.agents import (
    adjust_stop_duration,
    explain_editing_impact,
    swap_stop_with_alternative,
    update_itinerary_after_removal,
)
from tripwright.core.formatting import format_currency, format_stop_timing
from tripwright.schemas import ItineraryDay, Stop, TravelPlan
from tripwright.ui.plan import STATUS_KEY, commit_plan, current_plan, plan_settings

_LOGGER = logging.getLogger(__name__)

_NO_OP_MESSAGE = "Nothing changed. There was no valid edit to apply."


def _apply_edit(updated: TravelPlan, kind: str) -> None:
    message = explain_editing_impact(kind)
    if commit_plan(updated, message):
        _LOGGER.info("Applied %s edit", kind)
    else:
        st.session_state[STATUS_KEY] = _NO_OP_MESSAGE
    st.rerun()


def _render_stop(plan: TravelPlan, day_index: int, day: ItineraryDay, stop: Stop) -> None:
    details_col, action_col = st.columns([3, 2])
    with details_col:
        st.caption(f"Stop {stop.order} · {stop.category}")
        st.markdown(f"**{stop.name}**")
        if stop.description:
            st.write(stop.description)
        st.markdown(f"`{format_stop_timing(stop)}`")
        st.caption(
            f"Budget: {format_currency(stop.cost_usd)} · "
            f"Running total: {format_currency(stop.running_cost_usd)}"
        )
    settings = plan_settings()
    with action_col:
        swap_col, remove_col = st.columns(2)
        if swap_col.button("Swap suggestion", key=f"swap-{day.day}-{stop.id}"):
            _apply_edit(
                swap_stop_with_alternative(plan, day_index, stop.id, settings=settings), "swap"
            )
        if remove_col.button("Remove stop", key=f"remove-{day.day}-{stop.id}"):
            _apply_edit(
                update_itinerary_after_removal(plan, day_index, stop.id, settings=settings), "remove"
            )
        hours = st.slider(
            "Duration (hours)",
            min_value=1.0,
            max_value=4.0,
            value=float(stop.duration_hours),
            step=0.5,
            key=f"duration-{day.day}-{stop.id}-{stop.duration_hours}",
        )
        if hours != stop.duration_hours:
            _apply_edit(
                adjust_stop_duration(plan, day_index, stop.id, hours, settings=settings), "duration"
            )


def _render_day(plan: TravelPlan, day_index: int, day: ItineraryDay) -> None:
    with st.container(border=True):
        st.markdown(
            f"<span style='color:{day.color}'>●</span> **{day.title}**",
            unsafe_allow_html=True,
        )
        st.caption(day.summary)
        for warning in day.warnings:
            st.warning(warning)
        if not day.stops:
            st.info("No stops scheduled for this day.")
        for stop in day.stops:
            _render_stop(plan, day_index, day, stop)


def render_itinerary_tab(container) -> None:
    """Render one card per day with swap, remove and duration controls."""

    plan = current_plan()
    with container:
        st.subheader("Itinerary blueprint")
        if plan is None:
            st.info("Generate a plan to see the itinerary.")
            return
        st.caption(
            "Sequenced by proximity and vibe. Edit a stop to see the agent rebalance the day."
        )
        for day_index, day in enumerate(plan.itinerary):
            _render_day(plan, day_index, day)


__all__ = ["render_itinerary_tab"]
