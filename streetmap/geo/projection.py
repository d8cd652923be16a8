"""Transverse Mercator projection onto a local plane.

Longitude/latitude pairs are flattened around a reference origin so that
nearest-neighbour search can use plain Euclidean distance. Output units
are radians on the unit sphere scaled by ``k0``; only relative distances
matter to the spatial index.

See https://en.wikipedia.org/wiki/Transverse_Mercator_projection
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..config import ProjectionConfig
from ..domain.errors import ConfigurationError
from ..domain.models import Point, Vertex


def project_to_x(lon: float, lat: float, root_lon: float, k0: float = 1.0) -> float:
    """Return the planar x-value of (lon, lat) for an origin at ``root_lon``."""
    dlon = math.radians(lon - root_lon)
    phi = math.radians(lat)
    b = math.sin(dlon) * math.cos(phi)
    # 90 degrees off the central meridian on the equator maps to infinity.
    if b == 1 or b == -1:
        return math.copysign(math.inf, b)
    return (k0 / 2) * math.log((1 + b) / (1 - b))


def project_to_y(
    lon: float, lat: float, root_lon: float, root_lat: float, k0: float = 1.0
) -> float:
    """Return the planar y-value of (lon, lat) for an origin at (root_lon, root_lat)."""
    dlon = math.radians(lon - root_lon)
    phi = math.radians(lat)
    con = math.atan(math.tan(phi) / math.cos(dlon))
    return k0 * (con - math.radians(root_lat))


@dataclass(frozen=True, slots=True)
class CoordinateProjector:
    """Projection bound to one map region.

    Attributes:
        root_lon: Longitude of the projection origin
        root_lat: Latitude of the projection origin
        k0: Scale factor at the origin
    """

    root_lon: float
    root_lat: float
    k0: float = 1.0

    def project_to_x(self, lon: float, lat: float) -> float:
        return project_to_x(lon, lat, self.root_lon, self.k0)

    def project_to_y(self, lon: float, lat: float) -> float:
        return project_to_y(lon, lat, self.root_lon, self.root_lat, self.k0)

    def project(self, lon: float, lat: float) -> Point:
        """Project a coordinate pair into a Point."""
        return Point(self.project_to_x(lon, lat), self.project_to_y(lon, lat))

    @classmethod
    def from_config(cls, config: ProjectionConfig) -> CoordinateProjector:
        """Center the projection on the configured bounding box."""
        return cls(root_lon=config.root_lon, root_lat=config.root_lat, k0=config.k0)

    @classmethod
    def from_bounds(cls, vertices: Iterable[Vertex], k0: float = 1.0) -> CoordinateProjector:
        """Center the projection on the bounding box of ``vertices``.

        Raises:
            ConfigurationError: If ``vertices`` is empty.
        """
        lons = []
        lats = []
        for vertex in vertices:
            lons.append(vertex.lon)
            lats.append(vertex.lat)
        if not lons:
            raise ConfigurationError(
                "Cannot derive a projection origin from an empty vertex set",
                setting_name="projection",
            )
        return cls(
            root_lon=(min(lons) + max(lons)) / 2,
            root_lat=(min(lats) + max(lats)) / 2,
            k0=k0,
        )
