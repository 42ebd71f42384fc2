"""Projects a travel plan onto renderable map geometry."""

from __future__ import annotations

from typing import List

from tripwright.schemas import MapData, MapLeg, MapNode, TravelPlan

TRANSPORT_LEG_COLOR = "#0f172a"


def project_map(plan: TravelPlan) -> MapData:
    """Return the nodes and legs for ``plan``.

    The transport leg does not depend on the selected mode, so switching
    modes leaves the geometry unchanged.
    """

    goal = plan.goal
    nodes: List[MapNode] = [
        MapNode(
            id="origin",
            name=goal.origin.name,
            latitude=goal.origin.latitude,
            longitude=goal.origin.longitude,
            type="origin",
        ),
        MapNode(
            id="destination",
            name=goal.destination.name,
            latitude=goal.destination.latitude,
            longitude=goal.destination.longitude,
            type="destination",
        ),
    ]
    legs: List[MapLeg] = [
        MapLeg(
            id="transport",
            start=goal.origin.coordinates,
            end=goal.destination.coordinates,
            color=TRANSPORT_LEG_COLOR,
            label=f"{goal.origin.name} → {goal.destination.name}",
        )
    ]

    for day in plan.itinerary:
        for stop in day.stops:
            nodes.append(
                MapNode(
                    id=stop.id,
                    name=stop.name,
                    latitude=stop.latitude,
                    longitude=stop.longitude,
                    type="stop",
                    day=day.day,
                    order=stop.order,
                )
            )
        for index, (start, end) in enumerate(zip(day.stops, day.stops[1:]), start=1):
            legs.append(
                MapLeg(
                    id=f"d{day.day}-{index}",
                    start=start.coordinates,
                    end=end.coordinates,
                    color=day.color,
                    label=f"Day {day.day}: {start.name} → {end.name}",
                )
            )

    return MapData(nodes=nodes, legs=legs)


__all__ = ["TRANSPORT_LEG_COLOR", "project_map"]
