"""Graph ports - Abstractions for the street-map graph and routing.

These protocols define what the query core consumes from the
graph-loading collaborator and how route computation is exposed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult, Vertex, WeightedEdge


class StreetMapGraphPort(Protocol):
    """Port for a loaded street-map graph.

    Implementation: adapters/graph/memory_graph.py

    Vertices are owned by the implementation; the indexes only keep
    references to them.
    """

    def vertices(self) -> Sequence[Vertex]:
        """Return every vertex, named or not, isolated or not."""
        ...

    def vertex(self, vertex_id: int) -> Optional[Vertex]:
        """Return the vertex with ``vertex_id``, or None if unknown."""
        ...

    def neighbors(self, vertex_id: int) -> Iterable[WeightedEdge]:
        """Return the outgoing edges of ``vertex_id``."""
        ...

    def degree(self, vertex_id: int) -> int:
        """Return the number of outgoing edges of ``vertex_id``."""
        ...

    def estimated_distance_to_goal(self, vertex_id: int, goal_id: int) -> float:
        """Return a lower bound on the path weight between two vertices."""
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> StreetMapGraphPort:
        """Load the street-map graph.

        Returns:
            The loaded graph.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/astar_solver.py
    """

    def solve(
        self,
        graph: StreetMapGraphPort,
        start: int,
        goal: int,
        timeout_seconds: float,
    ) -> RouteResult:
        """Find the minimum-weight path between two vertices.

        Args:
            graph: The street-map graph.
            start: Start vertex id.
            goal: Goal vertex id.
            timeout_seconds: Search budget.

        Returns:
            RouteResult carrying the outcome, path, weight and stats.
        """
        ...
