"""Data schemas for the Tripwright planning engine."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class Place(BaseModel):
    """A named location with coordinates."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


class Goal(BaseModel):
    """Structured travel request extracted from free text."""

    origin: Place
    destination: Place
    days: PositiveInt
    theme: Optional[str] = None
    raw_text: str = ""

    model_config = ConfigDict(frozen=True)


class TransportMode(str, Enum):
    """Supported ways of getting from origin to destination.

    Declaration order doubles as the deterministic tie-break order.
    """

    FLIGHT = "Flight"
    TRAIN = "Train"
    BUS = "Bus"
    CAR = "Car"

    @classmethod
    def _missing_(cls, value: object) -> Optional["TransportMode"]:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None

    @property
    def rank(self) -> int:
        return list(TransportMode).index(self)


class TransportOption(BaseModel):
    """One candidate way to travel between origin and destination."""

    mode: TransportMode
    price_usd: float = Field(ge=0.0)
    duration_hours: float = Field(gt=0.0)
    carbon_kg: float = Field(ge=0.0)
    departure: str
    arrival: str
    summary: str = ""

    model_config = ConfigDict(frozen=True)


class Stop(BaseModel):
    """A single point-of-interest visit inside a day."""

    id: str
    name: str
    category: str
    description: str = ""
    order: int = Field(default=0, ge=0)
    duration_hours: float = Field(ge=0.5, le=12.0)
    cost_usd: float = Field(default=0.0, ge=0.0)
    latitude: float
    longitude: float
    arrival: Optional[str] = None
    departure: Optional[str] = None
    running_cost_usd: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


class ItineraryDay(BaseModel):
    """An ordered set of stops assigned to one day of the trip."""

    day: PositiveInt
    title: str = ""
    summary: str = ""
    color: str = "#94a3b8"
    stops: List[Stop] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def total_hours(self) -> float:
        return sum(stop.duration_hours for stop in self.stops)

    @property
    def total_cost_usd(self) -> float:
        return sum(stop.cost_usd for stop in self.stops)

    def find_stop(self, stop_id: str) -> Optional[Stop]:
        for stop in self.stops:
            if stop.id == stop_id:
                return stop
        return None


class StopCandidates(BaseModel):
    """Candidate pool returned by the stop catalog."""

    primary: List[Stop] = Field(default_factory=list)
    reserve: List[Stop] = Field(default_factory=list)
    alternates: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def pool(self) -> List[Stop]:
        return [*self.primary, *self.reserve]


NodeType = Literal["origin", "destination", "stop"]


class MapNode(BaseModel):
    """A renderable marker."""

    id: str
    name: str
    latitude: float
    longitude: float
    type: NodeType
    day: Optional[int] = None
    order: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class MapLeg(BaseModel):
    """A directed edge between two coordinates."""

    id: str
    start: Tuple[float, float]
    end: Tuple[float, float]
    color: str
    label: str = ""

    model_config = ConfigDict(frozen=True)


class MapData(BaseModel):
    """Geometry derived from a plan for spatial rendering."""

    nodes: List[MapNode] = Field(default_factory=list)
    legs: List[MapLeg] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class TravelPlan(BaseModel):
    """Complete, consistent snapshot of goal, transport, itinerary and map."""

    goal: Goal
    transport_options: List[TransportOption] = Field(min_length=1)
    best_by_cost: TransportOption
    best_by_time: TransportOption
    selected_transport: TransportOption
    itinerary: List[ItineraryDay] = Field(default_factory=list)
    map: MapData = Field(default_factory=MapData)
    stop_pool: List[Stop] = Field(default_factory=list)
    alternates: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("itinerary")
    @classmethod
    def _days_are_contiguous(cls, value: List[ItineraryDay]) -> List[ItineraryDay]:
        numbers = [day.day for day in value]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"Itinerary days must be numbered 1..N, got {numbers}")
        return value

    def all_stops(self) -> Iterable[Stop]:
        for day in self.itinerary:
            yield from day.stops

    def scheduled_ids(self) -> set[str]:
        return {stop.id for stop in self.all_stops()}

    def option_for(self, mode: TransportMode) -> Optional[TransportOption]:
        for option in self.transport_options:
            if option.mode == mode:
                return option
        return None


__all__ = [
    "Goal",
    "ItineraryDay",
    "MapData",
    "MapLeg",
    "MapNode",
    "Place",
    "Stop",
    "StopCandidates",
    "TransportMode",
    "TransportOption",
    "TravelPlan",
]
