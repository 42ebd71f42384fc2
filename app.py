"""Streamlit entry point for the Tripwright application."""
from __future__ import annotations

import logging
from typing import Sequence

import streamlit as st
from dotenv import load_dotenv

from tripwright.ui import ensure_plan_state, render_itinerary_tab, render_map_tab, render_plan_tab


_TAB_ORDER: Sequence[str] = ("Plan", "Itinerary", "Map")


def configure() -> None:
    """Configure global Streamlit settings and load environment variables."""

    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Tripwright", layout="wide")


def render() -> None:
    """Render the Tripwright multi-tab shell."""

    ensure_plan_state()

    st.title("🧭 Tripwright")
    st.caption(
        "Enter a travel goal and let the agent assemble transport, sequencing and balanced days. "
        "Adjust the plan and watch it re-optimise."
    )

    tab_containers = st.tabs(list(_TAB_ORDER))
    tab_lookup = {label: container for label, container in zip(_TAB_ORDER, tab_containers)}

    render_plan_tab(tab_lookup["Plan"])
    render_itinerary_tab(tab_lookup["Itinerary"])
    render_map_tab(tab_lookup["Map"])


if __name__ == "__main__":
    configure()
    render()
