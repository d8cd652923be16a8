"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for all tunables: the
projection origin, graph data locations, search defaults and logging.

Configuration can be overridden via environment variables:
- SMAP_PROJ_ULLAT=37.9
- SMAP_GRAPH_DATA_DIR=/path/to/data
- SMAP_SEARCH_DEFAULT_TIMEOUT_SECONDS=2.5
- SMAP_SEARCH_SPATIAL_INDEX=naive
- SMAP_LOG_STRUCTURED=true
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProjectionConfig(BaseSettings):
    """Projection origin configuration.

    The origin is the midpoint of the map's bounding box, given by its
    upper-left and lower-right corners. Defaults cover Berkeley.

    Environment variables prefixed with SMAP_PROJ_.
    """

    model_config = SettingsConfigDict(env_prefix="SMAP_PROJ_")

    ullat: float = 37.892195547244356
    ullon: float = -122.2998046875
    lrlat: float = 37.82280243352756
    lrlon: float = -122.2119140625
    # Scale factor at the natural origin; 1 rather than the UTM 0.9996.
    k0: float = 1.0

    @model_validator(mode="after")
    def _check_bounds(self) -> ProjectionConfig:
        if not (-90 <= self.lrlat <= self.ullat <= 90):
            raise ValueError("expected -90 <= lrlat <= ullat <= 90")
        if not (-180 <= self.ullon <= self.lrlon <= 180):
            raise ValueError("expected -180 <= ullon <= lrlon <= 180")
        if self.k0 <= 0:
            raise ValueError("k0 must be positive")
        return self

    @property
    def root_lat(self) -> float:
        """Latitude of the projection origin."""
        return (self.ullat + self.lrlat) / 2

    @property
    def root_lon(self) -> float:
        """Longitude of the projection origin."""
        return (self.ullon + self.lrlon) / 2


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with SMAP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SMAP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"
    # Street segments are traversable both ways unless stated otherwise.
    bidirectional: bool = True

    @property
    def vertices_path(self) -> Path:
        """Full path to vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class SearchConfig(BaseSettings):
    """Query configuration.

    Environment variables prefixed with SMAP_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="SMAP_SEARCH_")

    default_timeout_seconds: float = Field(default=10.0, ge=0)
    spatial_index: Literal["kdtree", "naive"] = "kdtree"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with SMAP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SMAP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.projection.root_lon)
        print(config.graph.vertices_path)

    Environment variables prefixed with SMAP_.
    """

    model_config = SettingsConfigDict(env_prefix="SMAP_")

    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
