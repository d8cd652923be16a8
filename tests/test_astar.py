"""Tests for the single-use A* solver."""

import itertools
import math
import random

import pytest

from streetmap.domain.models import SolverOutcome, WeightedEdge
from streetmap.graph.astar import AStarSolver


class DictGraph:
    """Directed test graph with a pluggable heuristic."""

    def __init__(self, edges, heuristic=None):
        self.adjacency = {}
        for source, target, weight in edges:
            self.adjacency.setdefault(source, []).append(WeightedEdge(source, target, weight))
        self.heuristic = heuristic or (lambda v, goal: 0.0)

    def neighbors(self, v):
        return self.adjacency.get(v, [])

    def estimated_distance_to_goal(self, v, goal):
        return self.heuristic(v, goal)


def _grid_graph(width, height):
    edges = []
    for x, y in itertools.product(range(width), range(height)):
        if x + 1 < width:
            edges += [((x, y), (x + 1, y), 1.0), ((x + 1, y), (x, y), 1.0)]
        if y + 1 < height:
            edges += [((x, y), (x, y + 1), 1.0), ((x, y + 1), (x, y), 1.0)]
    return edges


def _floyd_warshall(n, edges):
    dist = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0.0
    for source, target, weight in edges:
        dist[source][target] = min(dist[source][target], weight)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def test_prefers_cheaper_two_hop_path():
    graph = DictGraph([("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)])

    solver = AStarSolver(graph, "A", "C", timeout=10)

    assert solver.outcome() is SolverOutcome.SOLVED
    assert solver.solution() == ["A", "B", "C"]
    assert solver.solution_weight() == 2.0
    # A and B are expanded; C ends the search from the front of the queue.
    assert solver.num_states_explored() == 2
    assert solver.exploration_time() >= 0.0


def test_start_equal_to_goal_resolves_without_expansion():
    graph = DictGraph([("A", "B", 1.0)])

    solver = AStarSolver(graph, "A", "A", timeout=10)

    assert solver.outcome() is SolverOutcome.SOLVED
    assert solver.solution() == ["A"]
    assert solver.solution_weight() == 0.0
    assert solver.num_states_explored() == 0


def test_unreachable_goal_is_unsolvable():
    graph = DictGraph([("A", "B", 1.0), ("C", "D", 1.0)])

    solver = AStarSolver(graph, "A", "D", timeout=10)

    assert solver.outcome() is SolverOutcome.UNSOLVABLE
    assert solver.solution() == []
    assert solver.solution_weight() == 0.0
    assert solver.num_states_explored() == 2


def test_goal_without_edges_is_unsolvable():
    solver = AStarSolver(DictGraph([]), 1, 2, timeout=10)

    assert solver.outcome() is SolverOutcome.UNSOLVABLE
    assert solver.num_states_explored() == 1


def test_expired_budget_times_out_before_first_expansion():
    graph = DictGraph([("A", "B", 1.0)])

    solver = AStarSolver(graph, "A", "B", timeout=-1.0)

    assert solver.outcome() is SolverOutcome.TIMEOUT
    assert solver.solution() == []
    assert solver.solution_weight() == 0.0
    assert solver.num_states_explored() == 0


def test_zero_timeout_on_large_graph_times_out():
    graph = DictGraph(_grid_graph(150, 150))

    solver = AStarSolver(graph, (0, 0), (149, 149), timeout=0.0)

    assert solver.outcome() is SolverOutcome.TIMEOUT
    assert solver.solution() == []
    assert solver.num_states_explored() < 150 * 150


@pytest.mark.parametrize("seed", range(10))
def test_zero_heuristic_matches_exhaustive_shortest_paths(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 20)
    edges = [
        (rng.randrange(n), rng.randrange(n), float(rng.randint(1, 20)))
        for _ in range(rng.randint(0, n * 3))
    ]
    graph = DictGraph(edges)
    expected = _floyd_warshall(n, edges)
    weights = {}
    for source, target, weight in edges:
        weights[(source, target)] = min(weight, weights.get((source, target), math.inf))

    for start in range(n):
        for goal in range(n):
            solver = AStarSolver(graph, start, goal, timeout=10)
            if math.isinf(expected[start][goal]):
                assert solver.outcome() is SolverOutcome.UNSOLVABLE
                assert solver.solution() == []
                continue

            assert solver.outcome() is SolverOutcome.SOLVED
            assert solver.solution_weight() == pytest.approx(expected[start][goal])
            path = solver.solution()
            assert path[0] == start and path[-1] == goal
            assert sum(weights[(a, b)] for a, b in zip(path, path[1:])) == pytest.approx(
                solver.solution_weight()
            )


def test_admissible_heuristic_keeps_optimal_weight_with_fewer_expansions():
    edges = _grid_graph(20, 20)
    goal = (19, 0)

    def manhattan(v, g):
        return abs(v[0] - g[0]) + abs(v[1] - g[1])

    plain = AStarSolver(DictGraph(edges), (0, 0), goal, timeout=10)
    guided = AStarSolver(DictGraph(edges, manhattan), (0, 0), goal, timeout=10)

    assert guided.outcome() is SolverOutcome.SOLVED
    assert guided.solution_weight() == plain.solution_weight() == 19.0
    assert guided.num_states_explored() < plain.num_states_explored()


def test_inadmissible_heuristic_does_not_raise():
    graph = DictGraph(
        [("S", "A", 1.0), ("A", "G", 1.0), ("S", "G", 3.0)],
        heuristic=lambda v, goal: 100.0 if v == "A" else 0.0,
    )

    solver = AStarSolver(graph, "S", "G", timeout=10)

    assert solver.outcome() is SolverOutcome.SOLVED
    assert solver.solution() == ["S", "G"]
    assert solver.solution_weight() == 3.0


def test_solution_returns_a_copy():
    graph = DictGraph([("A", "B", 1.0)])
    solver = AStarSolver(graph, "A", "B", timeout=10)

    solver.solution().append("Z")

    assert solver.solution() == ["A", "B"]
