"""A* Route Solver adapter.

This adapter runs a fresh AStarSolver per query and adds:
- Domain model output (RouteResult)
- Logging of outcome and search statistics
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import VertexNotFoundError
from ...domain.models import RouteResult, SearchStats, SolverOutcome
from ...graph.astar import AStarSolver
from ...ports.graph import StreetMapGraphPort


@dataclass
class AStarRouteSolver:
    """Route solver using A* with the graph's distance estimate.

    This adapter implements RouteSolverPort. Unreachable goals and
    timeouts are returned as outcomes, never raised.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            RouteResult with outcome, path, weight and statistics.

        Raises:
            VertexNotFoundError: If start or goal is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": start, "goal": goal, "timeout": timeout_seconds},
        )

        for vertex_id in (start, goal):
            if graph.vertex(vertex_id) is None:
                raise VertexNotFoundError(
                    f"Vertex not in graph: {vertex_id}", vertex_id=vertex_id
                )

        solver: AStarSolver[int] = AStarSolver(graph, start, goal, timeout_seconds)
        outcome = solver.outcome()
        stats = SearchStats(
            states_explored=solver.num_states_explored(),
            exploration_time_seconds=solver.exploration_time(),
        )

        log = self._logger.info if outcome is SolverOutcome.SOLVED else self._logger.warning
        log(
            "Route search finished",
            extra={
                "start": start,
                "goal": goal,
                "outcome": outcome.name,
                "states_explored": stats.states_explored,
                "exploration_time": stats.exploration_time_seconds,
            },
        )

        return RouteResult(
            outcome=outcome,
            path=tuple(solver.solution()),
            weight=solver.solution_weight(),
            stats=stats,
        )
