"""Single-use A* shortest-path solver.

The solver runs to completion inside its constructor and then exposes
the outcome and diagnostics through accessor methods. The graph is only
consulted through ``neighbors`` and ``estimated_distance_to_goal``; the
estimate must never exceed the true remaining distance for the returned
path to be optimal. The solver does not check this.
"""

from __future__ import annotations

import time
from typing import Dict, Generic, Hashable, Iterable, List, Protocol, TypeVar

from ..domain.models import SolverOutcome, WeightedEdge
from .priority_queue import UpdatablePriorityQueue

V = TypeVar("V", bound=Hashable)


class AStarGraph(Protocol[V]):
    """What the solver needs from a graph."""

    def neighbors(self, v: V) -> Iterable[WeightedEdge]:
        ...

    def estimated_distance_to_goal(self, v: V, goal: V) -> float:
        ...


class AStarSolver(Generic[V]):
    """Find the minimum-weight path from ``start`` to ``goal``.

    Parameters
    ----------
    graph:
        Graph supplying outgoing edges and the heuristic.
    start, goal:
        Endpoints of the query.
    timeout:
        Wall-clock budget in seconds, checked before every expansion.
    """

    def __init__(self, graph: AStarGraph[V], start: V, goal: V, timeout: float) -> None:
        self._graph = graph
        self._goal = goal
        self._dist_to: Dict[V, float] = {start: 0.0}
        self._edge_to: Dict[V, V] = {}
        self._pq: UpdatablePriorityQueue[V] = UpdatablePriorityQueue()
        self._num_states_explored = 0
        self._solution: List[V] = []

        started = time.monotonic()
        self._pq.add(start, graph.estimated_distance_to_goal(start, goal))

        while True:
            if not self._pq:
                self._outcome = SolverOutcome.UNSOLVABLE
                break
            # Goal test on the frontier minimum, before it is expanded.
            if self._pq.peek() == goal:
                self._outcome = SolverOutcome.SOLVED
                break
            if time.monotonic() - started > timeout:
                self._outcome = SolverOutcome.TIMEOUT
                break

            p = self._pq.pop()
            self._num_states_explored += 1
            for edge in graph.neighbors(p):
                self._relax(edge)

        self._exploration_time = time.monotonic() - started

        if self._outcome is SolverOutcome.SOLVED:
            vertex = goal
            self._solution.append(vertex)
            while vertex != start:
                vertex = self._edge_to[vertex]
                self._solution.append(vertex)
            self._solution.reverse()

    def _relax(self, edge: WeightedEdge) -> None:
        p, q = edge.source, edge.target
        distance = self._dist_to[p] + edge.weight
        if q in self._dist_to and distance >= self._dist_to[q]:
            return
        self._dist_to[q] = distance
        self._edge_to[q] = p
        priority = distance + self._graph.estimated_distance_to_goal(q, self._goal)
        if q in self._pq:
            self._pq.change_priority(q, priority)
        else:
            self._pq.add(q, priority)

    def outcome(self) -> SolverOutcome:
        return self._outcome

    def solution(self) -> List[V]:
        """Vertices from start to goal inclusive; empty unless solved."""
        if self._outcome is not SolverOutcome.SOLVED:
            return []
        return list(self._solution)

    def solution_weight(self) -> float:
        """Total path weight; 0 unless solved."""
        if self._outcome is not SolverOutcome.SOLVED:
            return 0.0
        return self._dist_to[self._goal]

    def num_states_explored(self) -> int:
        return self._num_states_explored

    def exploration_time(self) -> float:
        """Seconds spent searching."""
        return self._exploration_time
