"""Linear-scan point set with the same interface as KDTree.

Useful as a reference when checking the tree and for very small maps.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

from ..domain.errors import EmptyIndexError
from ..domain.models import Point, Vertex
from .kdtree import PointVertexPair


class NaivePointSet:
    def __init__(self, pairs: Iterable[PointVertexPair]) -> None:
        self._vertices: Dict[Point, Vertex] = {}
        self._points = []
        for point, vertex in pairs:
            self._points.append(point)
            self._vertices[point] = vertex

    def __len__(self) -> int:
        return len(self._points)

    def nearest(self, x: float, y: float) -> Point:
        if not self._points:
            raise EmptyIndexError(
                "nearest() called on an empty index", index_type=type(self).__name__
            )
        best = self._points[0]
        best_d2 = math.inf
        for point in self._points:
            d2 = point.squared_distance(x, y)
            if d2 < best_d2:
                best, best_d2 = point, d2
        return best

    def vertex_at(self, point: Point) -> Optional[Vertex]:
        return self._vertices.get(point)

    def nearest_vertex(self, x: float, y: float) -> Vertex:
        return self._vertices[self.nearest(x, y)]
