"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryStreetMapGraph: Adjacency-list graph with great-circle weights
- CSVStreetMapRepository: Loads the graph from CSV files
- AStarRouteSolver: Finds minimum-weight paths using A*
"""

from .astar_solver import AStarRouteSolver
from .csv_repository import CSVStreetMapRepository
from .memory_graph import InMemoryStreetMapGraph, great_circle_km

__all__ = [
    "AStarRouteSolver",
    "CSVStreetMapRepository",
    "InMemoryStreetMapGraph",
    "great_circle_km",
]
