"""In-memory street-map graph.

This adapter implements StreetMapGraphPort and is what the repository
adapters fill when they load map data. Edge weights and the A* estimate
are both great-circle distances in kilometres, so the estimate never
exceeds the weight of any path built from unweighted edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from geopy.distance import great_circle

from ...domain.errors import GraphError, VertexNotFoundError
from ...domain.models import Vertex, WeightedEdge


def great_circle_km(a: Vertex, b: Vertex) -> float:
    """Great-circle distance between two vertices in kilometres."""
    return great_circle((a.lat, a.lon), (b.lat, b.lon)).km


@dataclass
class InMemoryStreetMapGraph:
    """Adjacency-list graph keyed by vertex id."""

    _vertices: Dict[int, Vertex] = field(default_factory=dict, repr=False)
    _adjacency: Dict[int, List[WeightedEdge]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_vertex(self, vertex: Vertex) -> None:
        """Register ``vertex``, replacing any vertex with the same id."""
        self._vertices[vertex.id] = vertex
        self._adjacency.setdefault(vertex.id, [])

    def add_edge(
        self,
        source: int,
        target: int,
        weight: Optional[float] = None,
        bidirectional: bool = False,
    ) -> None:
        """Connect two known vertices.

        Args:
            source: Id of the tail vertex.
            target: Id of the head vertex.
            weight: Edge weight; defaults to the great-circle distance.
            bidirectional: Also add the reverse edge with the same weight.

        Raises:
            VertexNotFoundError: If either endpoint is unknown.
            GraphError: If the weight is negative.
        """
        for vertex_id in (source, target):
            if vertex_id not in self._vertices:
                raise VertexNotFoundError(
                    f"Edge endpoint not in graph: {vertex_id}", vertex_id=vertex_id
                )
        if weight is None:
            weight = great_circle_km(self._vertices[source], self._vertices[target])
        if weight < 0:
            raise GraphError(f"Negative edge weight {weight} on {source}->{target}")

        self._adjacency[source].append(WeightedEdge(source, target, weight))
        if bidirectional:
            self._adjacency[target].append(WeightedEdge(target, source, weight))

    def vertices(self) -> Sequence[Vertex]:
        return list(self._vertices.values())

    def vertex(self, vertex_id: int) -> Optional[Vertex]:
        return self._vertices.get(vertex_id)

    def neighbors(self, vertex_id: int) -> Tuple[WeightedEdge, ...]:
        return tuple(self._adjacency.get(vertex_id, ()))

    def degree(self, vertex_id: int) -> int:
        return len(self._adjacency.get(vertex_id, ()))

    def estimated_distance_to_goal(self, vertex_id: int, goal_id: int) -> float:
        return great_circle_km(self._vertices[vertex_id], self._vertices[goal_id])

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices
