"""CSV Graph Repository adapter.

Loads a street-map graph from two CSV files:

- ``vertices.csv`` with columns ``id,lon,lat,name`` (name may be blank)
- ``edges.csv`` with columns ``from_id,to_id`` and an optional
  ``weight_km`` column; a blank weight falls back to the great-circle
  distance between the endpoints.

The loaded graph is cached until clear_cache() is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, StreetMapError
from ...domain.models import Vertex
from .memory_graph import InMemoryStreetMapGraph


@dataclass
class CSVStreetMapRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names, directionality)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[InMemoryStreetMapGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> InMemoryStreetMapGraph:
        """Load the street-map graph from CSV files.

        Returns:
            The loaded graph.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = InMemoryStreetMapGraph()
        try:
            self._load_vertices(graph)
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load vertices: {e}",
                file_path=str(self.config.vertices_path),
                cause=e,
            )
        try:
            num_edges = self._load_edges(graph)
        except (OSError, KeyError, ValueError, StreetMapError) as e:
            raise GraphError(
                f"Failed to load edges: {e}",
                file_path=str(self.config.edges_path),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": num_edges},
        )
        return graph

    def _load_vertices(self, graph: InMemoryStreetMapGraph) -> None:
        with self.config.vertices_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                raw_id = (row["id"] or "").strip()
                if not raw_id:
                    continue
                name = (row.get("name") or "").strip() or None
                graph.add_vertex(
                    Vertex(
                        id=int(raw_id),
                        lon=float(row.get("lon") or ""),
                        lat=float(row.get("lat") or ""),
                        name=name,
                    )
                )

    def _load_edges(self, graph: InMemoryStreetMapGraph) -> int:
        count = 0
        with self.config.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_id = (row["from_id"] or "").strip()
                to_id = (row["to_id"] or "").strip()
                if not from_id or not to_id:
                    continue

                weight_str = (row.get("weight_km") or "").strip()
                graph.add_edge(
                    int(from_id),
                    int(to_id),
                    weight=float(weight_str) if weight_str else None,
                    bidirectional=self.config.bidirectional,
                )
                count += 1
        return count

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
