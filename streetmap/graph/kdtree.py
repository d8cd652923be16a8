"""Static 2-d tree for exact nearest-neighbour queries.

The tree is built once from every projected vertex and never modified
afterwards. Nodes split on x at even depths and on y at odd depths; the
median point of each partition becomes the node, so the tree is balanced
at construction time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain.errors import EmptyIndexError
from ..domain.models import Point, Vertex

PointVertexPair = Tuple[Point, Vertex]


@dataclass(slots=True)
class KDNode:
    """A tree node owning one point and the vertex it was projected from."""

    point: Point
    vertex: Vertex
    left: Optional[KDNode] = None
    right: Optional[KDNode] = None


def _axis_value(point: Point, depth: int) -> float:
    return point.x if depth % 2 == 0 else point.y


class KDTree:
    """Exact nearest-neighbour index over projected points.

    Parameters
    ----------
    pairs:
        ``(Point, Vertex)`` pairs. When two vertices share a point, the
        later one is the vertex returned by :meth:`vertex_at`.
    """

    def __init__(self, pairs: Iterable[PointVertexPair]) -> None:
        items = list(pairs)
        self._vertices: Dict[Point, Vertex] = {}
        for point, vertex in items:
            self._vertices[point] = vertex
        self._size = len(items)
        self._root = self._build(items, 0)

    @classmethod
    def _build(cls, items: List[PointVertexPair], depth: int) -> Optional[KDNode]:
        if not items:
            return None
        items.sort(key=lambda item: _axis_value(item[0], depth))
        median = len(items) // 2
        point, vertex = items[median]
        return KDNode(
            point,
            vertex,
            cls._build(items[:median], depth + 1),
            cls._build(items[median + 1 :], depth + 1),
        )

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> Optional[KDNode]:
        return self._root

    def nearest(self, x: float, y: float) -> Point:
        """Return the indexed point closest to ``(x, y)``.

        Raises
        ------
        EmptyIndexError
            If the tree holds no points.
        """
        if self._root is None:
            raise EmptyIndexError(
                "nearest() called on an empty index", index_type=type(self).__name__
            )
        best, _ = self._nearest(self._root, x, y, 0, self._root, math.inf)
        return best.point

    def _nearest(
        self,
        node: Optional[KDNode],
        x: float,
        y: float,
        depth: int,
        best: KDNode,
        best_d2: float,
    ) -> Tuple[KDNode, float]:
        if node is None:
            return best, best_d2

        d2 = node.point.squared_distance(x, y)
        if d2 < best_d2:
            best, best_d2 = node, d2

        diff = (x - node.point.x) if depth % 2 == 0 else (y - node.point.y)
        if diff < 0:
            near, far = node.left, node.right
        else:
            near, far = node.right, node.left

        best, best_d2 = self._nearest(near, x, y, depth + 1, best, best_d2)
        # The far side can only hold a closer point if the splitting line does.
        if diff * diff < best_d2:
            best, best_d2 = self._nearest(far, x, y, depth + 1, best, best_d2)
        return best, best_d2

    def vertex_at(self, point: Point) -> Optional[Vertex]:
        """Return the vertex indexed at ``point``, if any."""
        return self._vertices.get(point)

    def nearest_vertex(self, x: float, y: float) -> Vertex:
        """Return the vertex whose projected point is closest to ``(x, y)``."""
        return self._vertices[self.nearest(x, y)]
