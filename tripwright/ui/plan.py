"""UI helpers for entering a goal and choosing how to get there."""

from __future__ import annotations

import logging
from typing import List, MutableMapping, Optional

import streamlit as st

from tripwright.agents import Editor, change_transport_mode
from tripwright.core.formatting import format_carbon, format_currency, format_duration
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.schemas import TransportOption, TravelPlan
from tripwright.workflows.trip_pipeline import plan_trip

_LOGGER = logging.getLogger(__name__)

INITIAL_GOAL = "Plan a 2-day trip to Tokyo from New Delhi"

PLAN_KEY = "travel_plan"
HISTORY_KEY = "_plan_history"
STATUS_KEY = "_plan_status"
SETTINGS_KEY = "_plan_settings"
_GOAL_KEY = "plan_goal_text"
_MODE_KEY = "plan_transport_mode"

_MAX_HISTORY = 20


def ensure_plan_state(state: Optional[MutableMapping[str, object]] = None) -> None:
    """Seed the session keys used by the plan, itinerary and map tabs."""

    state = st.session_state if state is None else state
    state.setdefault(PLAN_KEY, None)
    state.setdefault(HISTORY_KEY, [])
    state.setdefault(STATUS_KEY, None)
    state.setdefault(SETTINGS_KEY, None)
    state.setdefault(_GOAL_KEY, INITIAL_GOAL)


def current_plan(state: Optional[MutableMapping[str, object]] = None) -> Optional[TravelPlan]:
    state = st.session_state if state is None else state
    plan = state.get(PLAN_KEY)
    return plan if isinstance(plan, TravelPlan) else None


def plan_settings(state: Optional[MutableMapping[str, object]] = None) -> Optional[PlannerSettings]:
    """Return the settings the current plan was built with."""

    state = st.session_state if state is None else state
    settings = state.get(SETTINGS_KEY)
    return settings if isinstance(settings, PlannerSettings) else None


def commit_plan(
    plan: TravelPlan,
    message: Optional[str],
    state: Optional[MutableMapping[str, object]] = None,
) -> bool:
    """Make ``plan`` current, pushing the previous snapshot onto the undo history.

    Returns False when ``plan`` is the current snapshot (a no-op edit).
    """

    state = st.session_state if state is None else state
    previous = current_plan(state)
    if previous is plan:
        return False
    if previous is not None:
        history: List[TravelPlan] = list(state.get(HISTORY_KEY) or [])
        history.append(previous)
        state[HISTORY_KEY] = history[-_MAX_HISTORY:]
    state[PLAN_KEY] = plan
    state[STATUS_KEY] = message
    return True


def undo_last_edit(state: Optional[MutableMapping[str, object]] = None) -> bool:
    """Restore the previous snapshot. Returns False when there is nothing to undo."""

    state = st.session_state if state is None else state
    history: List[TravelPlan] = list(state.get(HISTORY_KEY) or [])
    if not history:
        return False
    state[PLAN_KEY] = history.pop()
    state[HISTORY_KEY] = history
    state[STATUS_KEY] = "Restored the previous version of the plan."
    return True


def start_new_plan(goal_text: str, state: Optional[MutableMapping[str, object]] = None) -> TravelPlan:
    state = st.session_state if state is None else state
    settings = load_settings()
    plan = plan_trip(goal_text, settings=settings)
    state[SETTINGS_KEY] = settings
    state[PLAN_KEY] = plan
    state[HISTORY_KEY] = []
    state[STATUS_KEY] = Editor().describe_plan(plan)
    return plan


def _render_option_card(column, heading: str, option: TransportOption, headline: str) -> None:
    with column:
        st.markdown(f"**{heading} ({option.mode.value})**")
        st.markdown(f"### {headline}")
        st.caption(f"Departs {option.departure} · Arrives {option.arrival}")
        st.caption(option.summary)


def _render_transport(plan: TravelPlan) -> None:
    st.subheader("Transport strategy")
    st.caption(
        f"Comparing price vs. time for {plan.goal.origin.name} → {plan.goal.destination.name}. "
        "Modes filtered by realistic range."
    )
    value_col, fast_col, select_col = st.columns([2, 2, 2])
    _render_option_card(
        value_col,
        "Best value",
        plan.best_by_cost,
        f"{format_currency(plan.best_by_cost.price_usd)} · {format_duration(plan.best_by_cost.duration_hours)}",
    )
    _render_option_card(
        fast_col,
        "Fastest arrival",
        plan.best_by_time,
        f"{format_duration(plan.best_by_time.duration_hours)} · {format_currency(plan.best_by_time.price_usd)}",
    )

    modes = [option.mode.value for option in plan.transport_options]
    selected = plan.selected_transport
    with select_col:
        choice = st.selectbox(
            "Selected mode",
            modes,
            index=modes.index(selected.mode.value),
            key=f"{_MODE_KEY}-{selected.mode.value}",
        )
        st.caption(
            f"{format_duration(selected.duration_hours)} · {format_currency(selected.price_usd)} · "
            f"{format_carbon(selected.carbon_kg)}"
        )
    if choice != selected.mode.value:
        updated = change_transport_mode(plan, choice, settings=plan_settings())
        if commit_plan(updated, Editor().describe_transport_change(choice)):
            st.rerun()


def render_plan_tab(container) -> None:
    """Render the goal form and transport comparison inside ``container``."""

    with container:
        with st.form("plan_goal_form"):
            goal_text = st.text_input("Travel goal", key=_GOAL_KEY, placeholder=INITIAL_GOAL)
            submitted = st.form_submit_button("Generate plan", type="primary")
        if submitted:
            with st.spinner("Thinking…"):
                start_new_plan(goal_text or INITIAL_GOAL)
            _LOGGER.info("Generated plan for goal: %s", goal_text)

        status = st.session_state.get(STATUS_KEY)
        if status:
            st.success(status)

        plan = current_plan()
        if plan is None:
            st.info("Enter a travel goal to assemble transport and a day-by-day plan.")
            return

        history = st.session_state.get(HISTORY_KEY) or []
        if st.button("Undo last edit", key="plan_undo", disabled=not history):
            undo_last_edit()
            st.rerun()

        _render_transport(plan)

        st.subheader("Agent reasoning")
        st.markdown("\n".join(f"- {line}" for line in Editor().reasoning(plan)))


__all__ = [
    "HISTORY_KEY",
    "INITIAL_GOAL",
    "PLAN_KEY",
    "SETTINGS_KEY",
    "STATUS_KEY",
    "commit_plan",
    "current_plan",
    "ensure_plan_state",
    "plan_settings",
    "render_plan_tab",
    "start_new_plan",
    "undo_last_edit",
]
