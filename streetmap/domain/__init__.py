"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyIndexError,
    GraphError,
    StreetMapError,
    VertexNotFoundError,
)
from .models import (
    LocationRecord,
    Point,
    RouteResult,
    SearchStats,
    SolverOutcome,
    Vertex,
    WeightedEdge,
)

__all__ = [
    # Models
    "Point",
    "Vertex",
    "WeightedEdge",
    "LocationRecord",
    "SearchStats",
    "RouteResult",
    "SolverOutcome",
    # Errors
    "StreetMapError",
    "GraphError",
    "VertexNotFoundError",
    "EmptyIndexError",
    "ConfigurationError",
]
