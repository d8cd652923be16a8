"""Services layer - Query orchestration.

Available services:
- AugmentedStreetMapGraph: nearest-vertex, place-name and route queries
"""

from .augmented_graph import AugmentedStreetMapGraph

__all__ = ["AugmentedStreetMapGraph"]
