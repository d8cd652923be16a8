"""Index ports - Abstractions for the spatial index.

Implementations:
- graph/kdtree.py (KDTree) - Production
- graph/naive_point_set.py (NaivePointSet) - Reference / tiny maps
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Point, Vertex


class SpatialIndexPort(Protocol):
    """Port for exact nearest-point lookup over projected vertices."""

    def __len__(self) -> int:
        ...

    def nearest(self, x: float, y: float) -> Point:
        """Return the indexed point closest to ``(x, y)``.

        Raises:
            EmptyIndexError: If the index holds no points.
        """
        ...

    def vertex_at(self, point: Point) -> Optional[Vertex]:
        """Return the vertex registered at ``point``, if any."""
        ...

    def nearest_vertex(self, x: float, y: float) -> Vertex:
        """Return the vertex registered at ``nearest(x, y)``."""
        ...
