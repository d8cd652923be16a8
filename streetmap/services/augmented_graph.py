"""Augmented street-map graph - query service over a loaded graph.

On construction the service indexes the graph once:
1. Non-isolated vertices are projected and put in the spatial index
2. Named vertices are canonicalised into the prefix trie and the
   canonical-name lookup

The indexes are read-only afterwards. Route queries run a fresh solver
per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..adapters.graph.astar_solver import AStarRouteSolver
from ..config import AppConfig, get_config
from ..domain.models import LocationRecord, RouteResult, Vertex
from ..geo.projection import CoordinateProjector
from ..graph.kdtree import KDTree, PointVertexPair
from ..graph.naive_point_set import NaivePointSet
from ..graph.trie import PrefixTrie, clean_string
from ..ports.graph import RouteSolverPort, StreetMapGraphPort
from ..ports.index import SpatialIndexPort

SpatialIndexFactory = Callable[[Iterable[PointVertexPair]], SpatialIndexPort]

_INDEX_FACTORIES: Dict[str, SpatialIndexFactory] = {
    "kdtree": KDTree,
    "naive": NaivePointSet,
}


@dataclass
class AugmentedStreetMapGraph:
    """Nearest-vertex, place-name and routing queries over a street map.

    Attributes:
        graph: The loaded street-map graph
        projector: Projection shared by indexing and querying
        route_solver: Computes minimum-weight paths
        index_factory: Builds the spatial index from (Point, Vertex) pairs
        default_timeout_seconds: Route budget when the caller gives none
    """

    graph: StreetMapGraphPort
    projector: CoordinateProjector
    route_solver: RouteSolverPort = field(default_factory=AStarRouteSolver)
    index_factory: SpatialIndexFactory = KDTree
    default_timeout_seconds: float = 10.0

    _index: SpatialIndexPort = field(init=False, repr=False)
    _trie: PrefixTrie = field(init=False, repr=False)
    _by_name: Dict[str, List[Vertex]] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._build_spatial_index()
        self._build_name_index()

    @classmethod
    def from_config(
        cls,
        graph: StreetMapGraphPort,
        config: Optional[AppConfig] = None,
        route_solver: Optional[RouteSolverPort] = None,
    ) -> AugmentedStreetMapGraph:
        """Create the service with projection and index chosen by config."""
        config = config or get_config()
        return cls(
            graph=graph,
            projector=CoordinateProjector.from_config(config.projection),
            route_solver=route_solver or AStarRouteSolver(),
            index_factory=_INDEX_FACTORIES[config.search.spatial_index],
            default_timeout_seconds=config.search.default_timeout_seconds,
        )

    def _build_spatial_index(self) -> None:
        pairs = [
            (self.projector.project(v.lon, v.lat), v)
            for v in self.graph.vertices()
            if self.graph.degree(v.id) != 0
        ]
        self._index = self.index_factory(pairs)

        collisions = len(pairs) - len({point for point, _ in pairs})
        if collisions:
            # Later vertices shadow earlier ones at the same point.
            self._logger.warning(
                "Coincident projected vertices",
                extra={"collisions": collisions},
            )
        self._logger.info(
            "Spatial index built",
            extra={"points": len(pairs), "index": type(self._index).__name__},
        )

    def _build_name_index(self) -> None:
        self._trie = PrefixTrie()
        self._by_name = {}
        for vertex in self.graph.vertices():
            if vertex.name is None:
                continue
            key = clean_string(vertex.name)
            if not key.strip():
                continue
            self._trie.add(key)
            self._by_name.setdefault(key, []).append(vertex)

        self._logger.info(
            "Name index built",
            extra={"names": len(self._trie)},
        )

    def closest(self, lon: float, lat: float) -> int:
        """Return the id of the non-isolated vertex closest to (lon, lat).

        Raises:
            EmptyIndexError: If the graph has no non-isolated vertex.
        """
        x = self.projector.project_to_x(lon, lat)
        y = self.projector.project_to_y(lon, lat)
        return self._index.nearest_vertex(x, y).id

    def get_locations_by_prefix(self, prefix: str) -> List[str]:
        """Return display names of locations whose canonical name starts with ``prefix``.

        Args:
            prefix: Any case, with or without punctuation.

        Returns:
            One entry per matching vertex, so shared names may repeat.
        """
        names: List[str] = []
        for key in self._trie.keys_with_prefix(prefix):
            for vertex in self._by_name.get(key, ()):
                names.append(vertex.name or "")
        if not names:
            self._logger.debug("No location matches prefix", extra={"prefix": prefix})
        return names

    def get_locations(self, name: str) -> List[Dict[str, Any]]:
        """Return ``{lat, lon, name, id}`` for every vertex matching ``name``.

        Matching is on canonical names; a miss is an empty list.
        """
        vertices = self._by_name.get(clean_string(name), ())
        return [LocationRecord.from_vertex(v).as_dict() for v in vertices]

    def solve_route(
        self,
        start: int,
        goal: int,
        timeout_seconds: Optional[float] = None,
    ) -> RouteResult:
        """Run a one-shot route query between two vertex ids.

        Callers must check ``RouteResult.outcome`` before using the
        path or weight.

        Raises:
            VertexNotFoundError: If start or goal is not in the graph.
        """
        if timeout_seconds is None:
            timeout_seconds = self.default_timeout_seconds
        return self.route_solver.solve(self.graph, start, goal, timeout_seconds)
