import math

import pytest

from streetmap.config import ProjectionConfig
from streetmap.domain.errors import ConfigurationError
from streetmap.domain.models import Point, Vertex
from streetmap.geo.projection import CoordinateProjector, project_to_x, project_to_y


ROOT_LON = -122.25
ROOT_LAT = 37.85


def test_origin_projects_to_zero():
    assert project_to_x(ROOT_LON, ROOT_LAT, ROOT_LON) == 0.0
    assert project_to_y(ROOT_LON, ROOT_LAT, ROOT_LON, ROOT_LAT) == pytest.approx(0.0)


def test_axes_point_east_and_north():
    projector = CoordinateProjector(root_lon=ROOT_LON, root_lat=ROOT_LAT)

    east = projector.project(ROOT_LON + 0.01, ROOT_LAT)
    north = projector.project(ROOT_LON, ROOT_LAT + 0.01)

    assert east.x > 0
    assert north.y > 0
    assert north.x == 0.0


def test_x_is_symmetric_around_the_origin():
    projector = CoordinateProjector(root_lon=ROOT_LON, root_lat=ROOT_LAT)

    left = projector.project_to_x(ROOT_LON - 0.02, 37.87)
    right = projector.project_to_x(ROOT_LON + 0.02, 37.87)

    assert left == pytest.approx(-right)


def test_small_offsets_are_close_to_radians():
    projector = CoordinateProjector(root_lon=ROOT_LON, root_lat=0.0)

    point = projector.project(ROOT_LON + 0.001, 0.001)

    assert point.x == pytest.approx(math.radians(0.001), rel=1e-6)
    assert point.y == pytest.approx(math.radians(0.001), rel=1e-6)


def test_k0_scales_both_axes():
    unit = CoordinateProjector(root_lon=ROOT_LON, root_lat=ROOT_LAT)
    doubled = CoordinateProjector(root_lon=ROOT_LON, root_lat=ROOT_LAT, k0=2.0)

    a = unit.project(-122.26, 37.86)
    b = doubled.project(-122.26, 37.86)

    assert b.x == pytest.approx(2 * a.x)
    assert b.y == pytest.approx(2 * a.y)


def test_project_returns_value_equal_points():
    projector = CoordinateProjector(root_lon=ROOT_LON, root_lat=ROOT_LAT)

    assert projector.project(-122.26, 37.86) == projector.project(-122.26, 37.86)
    assert isinstance(projector.project(-122.26, 37.86), Point)


def test_from_config_uses_bounding_box_midpoint():
    config = ProjectionConfig(ullat=38.0, ullon=-123.0, lrlat=37.0, lrlon=-122.0)

    projector = CoordinateProjector.from_config(config)

    assert projector.root_lat == 37.5
    assert projector.root_lon == -122.5
    assert projector.k0 == 1.0


def test_from_bounds_uses_vertex_extent():
    vertices = [
        Vertex(id=1, lon=-122.30, lat=37.80),
        Vertex(id=2, lon=-122.20, lat=37.90),
        Vertex(id=3, lon=-122.25, lat=37.82),
    ]

    projector = CoordinateProjector.from_bounds(vertices)

    assert projector.root_lon == pytest.approx(-122.25)
    assert projector.root_lat == pytest.approx(37.85)


def test_from_bounds_rejects_empty_input():
    with pytest.raises(ConfigurationError):
        CoordinateProjector.from_bounds([])


def test_quarter_turn_on_the_equator_projects_to_infinity():
    assert project_to_x(90.0, 0.0, 0.0) == math.inf
    assert project_to_x(-90.0, 0.0, 0.0) == -math.inf

    point = CoordinateProjector(root_lon=0.0, root_lat=0.0).project(90.0, 0.0)
    assert point.x == math.inf
