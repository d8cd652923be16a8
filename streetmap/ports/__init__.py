"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the query core and the external
collaborators. They enable dependency injection and make the system
testable.
"""

from .graph import GraphRepositoryPort, RouteSolverPort, StreetMapGraphPort
from .index import SpatialIndexPort

__all__ = [
    # Graph
    "StreetMapGraphPort",
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Index
    "SpatialIndexPort",
]
