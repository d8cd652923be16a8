"""Typed domain errors for the street-map query core.

Only programming errors and bad input data are raised as exceptions.
Search exhaustion and timeouts are ordinary outcomes and are reported
through ``SolverOutcome`` instead.

All errors inherit from StreetMapError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StreetMapError(Exception):
    """Base error for the street-map domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(StreetMapError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(StreetMapError):
    """Vertex id not present in the graph.

    Attributes:
        vertex_id: The id that was looked up
    """

    vertex_id: Optional[int] = None


@dataclass
class EmptyIndexError(StreetMapError):
    """Nearest-point query issued against an index with no points.

    Attributes:
        index_type: Name of the index class that was queried
    """

    index_type: str = ""


@dataclass
class ConfigurationError(StreetMapError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
