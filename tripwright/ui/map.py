"""Interactive itinerary map view."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import pydeck as pdk
import streamlit as st

from tripwright.schemas import MapData, MapNode
from tripwright.ui.plan import current_plan

_NODE_LAYER_ID = "plan-nodes"
_LEG_LAYER_ID = "plan-legs"

_NODE_COLORS: Dict[str, Tuple[int, int, int, int]] = {
    "origin": (15, 23, 42, 230),
    "destination": (16, 185, 129, 230),
}
_NODE_RADII: Dict[str, int] = {"origin": 400, "destination": 300, "stop": 90}


def hex_to_rgba(value: str, alpha: int = 220) -> List[int]:
    """Convert ``#rrggbb`` into the ``[r, g, b, a]`` list pydeck expects."""

    cleaned = value.lstrip("#")
    if len(cleaned) != 6:
        return [148, 163, 184, alpha]
    return [int(cleaned[index : index + 2], 16) for index in (0, 2, 4)] + [alpha]


def _node_payload(node: MapNode, day_colors: Dict[int, str]) -> Dict[str, object]:
    if node.type == "stop":
        color = hex_to_rgba(day_colors.get(node.day or 0, "#94a3b8"))
        subtitle = f"Day {node.day} · Stop {node.order}"
    else:
        color = list(_NODE_COLORS[node.type])
        subtitle = node.type.capitalize()
    return {
        "id": node.id,
        "longitude": node.longitude,
        "latitude": node.latitude,
        "color": color,
        "radius": _NODE_RADII[node.type],
        "title": node.name,
        "subtitle": subtitle,
    }


def _compute_view_state(nodes: Sequence[MapNode]) -> pdk.ViewState:
    relevant = [node for node in nodes if node.type in {"destination", "stop"}]
    if not relevant:
        return pdk.ViewState(latitude=0, longitude=0, zoom=1)
    avg_lat = sum(node.latitude for node in relevant) / len(relevant)
    avg_lon = sum(node.longitude for node in relevant) / len(relevant)
    return pdk.ViewState(latitude=avg_lat, longitude=avg_lon, zoom=11)


def build_deck(map_data: MapData, day_colors: Dict[int, str] | None = None) -> pdk.Deck:
    """Build a pydeck deck with one marker per node and one line per leg."""

    colors = day_colors or {}
    if not colors:
        for leg in map_data.legs:
            if leg.id.startswith("d"):
                colors.setdefault(int(leg.id[1:].split("-")[0]), leg.color)

    node_dicts = [_node_payload(node, colors) for node in map_data.nodes]
    leg_dicts = [
        {
            "id": leg.id,
            "start": [leg.start[1], leg.start[0]],
            "end": [leg.end[1], leg.end[0]],
            "color": hex_to_rgba(leg.color),
            "title": leg.label,
            "subtitle": "",
        }
        for leg in map_data.legs
    ]

    layers = []
    if leg_dicts:
        layers.append(
            pdk.Layer(
                "LineLayer",
                data=leg_dicts,
                id=_LEG_LAYER_ID,
                get_source_position="start",
                get_target_position="end",
                get_color="color",
                get_width=4,
                pickable=True,
            )
        )
    if node_dicts:
        layers.append(
            pdk.Layer(
                "ScatterplotLayer",
                data=node_dicts,
                id=_NODE_LAYER_ID,
                get_position="[longitude, latitude]",
                get_fill_color="color",
                get_line_color="color",
                get_radius="radius",
                radius_units="meters",
                pickable=True,
                stroked=True,
            )
        )

    tooltip = {
        "html": "<b>{title}</b><br/>{subtitle}",
        "style": {"backgroundColor": "#111", "color": "white"},
    }
    return pdk.Deck(
        map_style="https://basemaps.cartocdn.com/gl/positron-gl-style/style.json",
        layers=layers,
        initial_view_state=_compute_view_state(map_data.nodes),
        tooltip=tooltip,
    )


def render_map_tab(container) -> None:
    """Render the spatial overview of the current plan."""

    plan = current_plan()
    with container:
        st.subheader("Spatial overview")
        if plan is None:
            st.info("Generate a plan to explore it on the map.")
            return
        st.caption(
            "Dark line shows the inbound leg. Day colours match the cards for quick orientation."
        )
        day_colors = {day.day: day.color for day in plan.itinerary}
        st.pydeck_chart(build_deck(plan.map, day_colors), key="itinerary_map")


__all__ = ["build_deck", "hex_to_rgba", "render_map_tab"]
