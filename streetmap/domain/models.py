"""Immutable domain models for the street-map query core.

All models are frozen dataclasses with slots. They have no external
dependencies and are shared by the indexes, the solver and the
graph adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class SolverOutcome(Enum):
    """Terminal state of a single route search."""

    SOLVED = auto()
    TIMEOUT = auto()
    UNSOLVABLE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A location in projected planar space."""

    x: float
    y: float

    def squared_distance(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class Vertex:
    """A street-map vertex.

    Attributes:
        id: Graph identifier (OSM node id in practice)
        lon: Longitude in degrees
        lat: Latitude in degrees
        name: Display name, if the vertex is a named location
    """

    id: int
    lon: float
    lat: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")
        if not -180 <= self.lon <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.lon}"
            )


@dataclass(frozen=True, slots=True)
class WeightedEdge:
    """A directed edge with a non-negative weight."""

    source: Any
    target: Any
    weight: float


@dataclass(frozen=True, slots=True)
class LocationRecord:
    """A named location as returned by location lookups."""

    lat: float
    lon: float
    name: str
    id: int

    @classmethod
    def from_vertex(cls, vertex: Vertex) -> LocationRecord:
        return cls(lat=vertex.lat, lon=vertex.lon, name=vertex.name or "", id=vertex.id)

    def as_dict(self) -> Dict[str, Any]:
        return {"lat": self.lat, "lon": self.lon, "name": self.name, "id": self.id}


@dataclass(frozen=True, slots=True)
class SearchStats:
    """Diagnostics of a route search, valid for every outcome.

    Attributes:
        states_explored: Number of vertices removed from the frontier
        exploration_time_seconds: Wall-clock time spent searching
    """

    states_explored: int = 0
    exploration_time_seconds: float = 0.0


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query between two vertices.

    Attributes:
        outcome: How the search terminated
        path: Vertex ids from start to goal (empty unless solved)
        weight: Total path weight (0 unless solved)
        stats: Search diagnostics
    """

    outcome: SolverOutcome
    path: tuple[int, ...] = field(default_factory=tuple)
    weight: float = 0.0
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def is_solved(self) -> bool:
        """Check if the search reached the goal."""
        return self.outcome is SolverOutcome.SOLVED

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.path)
