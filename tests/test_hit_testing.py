import math

import pytest

from cadgeo_engine import Point, Polygon, TransformParams


@pytest.fixture
def box():
    return Polygon.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_point_inside_and_outside(engine, box):
    assert engine.point_in_polygon(Point(5, 5), box)
    assert not engine.point_in_polygon(Point(15, 5), box)
    assert not engine.point_in_polygon(Point(-1, 5), box)
    assert not engine.point_in_polygon(Point(5, 11), box)


@pytest.mark.parametrize("point, expected", [
    (Point(0, 5), True),    # min-x edge
    (Point(5, 0), True),    # min-y edge
    (Point(10, 5), False),  # max-x edge
    (Point(5, 10), False),  # max-y edge
    (Point(0, 0), True),    # min corner
    (Point(10, 10), False), # max corner
])
def test_boundary_rule_is_half_open(engine, box, point, expected):
    assert engine.point_in_polygon(point, box) is expected


def test_shared_edge_claimed_by_one_shape_only(engine):
    left = Polygon.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])
    right = Polygon.from_points([(10, 0), (20, 0), (20, 10), (10, 10)])
    point = Point(10, 5)

    hits = [engine.point_in_polygon(point, left), engine.point_in_polygon(point, right)]

    assert hits.count(True) == 1


def test_concave_polygon(engine):
    # U shape opening upward
    u_shape = Polygon.from_points([(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)])

    assert engine.point_in_polygon(Point(0.5, 2), u_shape)
    assert not engine.point_in_polygon(Point(1.5, 2), u_shape)


def test_degenerate_polygons_never_hit(engine):
    assert not engine.point_in_polygon(Point(0, 0), Polygon(()))
    assert not engine.point_in_polygon(Point(0, 0), Polygon.from_points([(0, 0)]))
    assert not engine.point_in_polygon(Point(0.5, 0), Polygon.from_points([(0, 0), (1, 0)]))


def test_rotated_shape_uses_world_vertices(engine):
    # A 45 degree diamond no longer covers its local-space corner region
    world = engine.world_polygon(
        engine.square(20),
        TransformParams(translate=Point(100, 100), rotate=math.pi / 4),
    )

    assert engine.point_in_polygon(Point(100, 100), world)
    assert engine.point_in_polygon(Point(113, 100), world)
    assert not engine.point_in_polygon(Point(109, 109), world)
