"""Geographic helpers: projection of lon/lat onto a local plane."""

from .projection import CoordinateProjector, project_to_x, project_to_y

__all__ = ["CoordinateProjector", "project_to_x", "project_to_y"]
