"""
Test Geometry Primitives and Convex Hull Construction
=====================================================

Covers Point/Line predicates, segment intersection and ConvexHull
canonicalization (vertex order, edges, area).

Usage:
    pytest test_geometry.py
"""

import itertools
import math

import numpy as np
import pytest

from hullfilter_core.geometry import (
    UNSET_HULL_ID,
    ConvexHull,
    InvalidPolygonError,
    Line,
    Point,
    is_inside,
    is_left_of,
    segment_intersection,
    shoelace_area,
    sort_vertices,
)


UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
PENTAGON = [(0, 0), (2, 0), (3, 1.5), (1, 3), (-1, 1.5)]


# ========== Primitives ==========

def test_is_left_of_strict():
    """Left-of is strict: points on the line are not left of it."""
    line = Line(Point(0, 0), Point(1, 0))

    assert is_left_of(Point(0.5, 1), line)
    assert not is_left_of(Point(0.5, -1), line)
    assert not is_left_of(Point(0.5, 0), line)
    assert not is_left_of(Point(3, 0), line)


def test_is_left_of_depends_on_direction():
    point = Point(0.5, 1)
    assert is_left_of(point, Line(Point(0, 0), Point(1, 0)))
    assert not is_left_of(point, Line(Point(1, 0), Point(0, 0)))


def test_segment_intersection_crossing():
    line1 = Line(Point(0, 0), Point(2, 2))
    line2 = Line(Point(0, 2), Point(2, 0))

    assert segment_intersection(line1, line2) == Point(1.0, 1.0)


def test_segment_intersection_outside_segment_bounds():
    """Infinite lines meet at (3, 0), but the segments do not reach it."""
    line1 = Line(Point(0, 0), Point(1, 0))
    line2 = Line(Point(3, -1), Point(3, 1))

    assert segment_intersection(line1, line2) is None


def test_segment_intersection_parallel():
    line1 = Line(Point(0, 0), Point(1, 0))
    line2 = Line(Point(0, 1), Point(1, 1))

    assert segment_intersection(line1, line2) is None


def test_segment_intersection_collinear_overlap_is_not_reported():
    """Collinear overlapping segments have a zero determinant."""
    line1 = Line(Point(0, 0), Point(2, 0))
    line2 = Line(Point(1, 0), Point(3, 0))

    assert segment_intersection(line1, line2) is None


def test_segment_intersection_shared_endpoint():
    """uA == 1 and uB == 0: the shared corner itself is returned."""
    line1 = Line(Point(0, 0), Point(1, 0))
    line2 = Line(Point(1, 0), Point(1, 1))

    assert segment_intersection(line1, line2) == Point(1, 0)


def test_segment_intersection_endpoint_touching_interior():
    """T-junction: the end of one segment lies inside the other."""
    line1 = Line(Point(0.3, 0.7), Point(0.3, 0))
    line2 = Line(Point(0, 0), Point(1, 0))

    assert segment_intersection(line1, line2) == Point(0.3, 0)
    assert segment_intersection(line2, line1) == Point(0.3, 0)


# ========== ConvexHull ==========

def test_hull_vertices_sorted_counter_clockwise():
    hull = ConvexHull([(1, 1), (0, 0), (0, 1), (1, 0)], hull_id=4)

    assert hull.vertices == (Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))
    assert hull.hull_id == 4


def test_hull_edges_close_the_polygon():
    hull = ConvexHull(UNIT_SQUARE)

    assert len(hull.edges) == len(hull.vertices) == 4
    for edge, next_edge in zip(hull.edges, hull.edges[1:] + hull.edges[:1]):
        assert edge.end == next_edge.start
    assert hull.edges[-1] == Line(Point(0, 1), Point(0, 0))


def test_hull_edges_have_interior_on_the_left():
    hull = ConvexHull(PENTAGON)

    for edge in hull.edges:
        assert is_left_of(hull.centroid, edge)


def test_hull_area_and_centroid():
    hull = ConvexHull([(0, 0), (4, 0), (4, 3), (0, 3)])

    assert hull.area == pytest.approx(12.0)
    assert hull.centroid == Point(2.0, 1.5)


def test_hull_default_id_is_unset():
    assert ConvexHull(UNIT_SQUARE).hull_id == UNSET_HULL_ID == -1


def test_hull_area_invariant_under_vertex_permutation():
    expected = ConvexHull(PENTAGON).area

    for permutation in itertools.permutations(PENTAGON):
        hull = ConvexHull(permutation)
        assert hull.area == pytest.approx(expected)
        assert hull.vertices == ConvexHull(PENTAGON).vertices


def test_hull_accepts_points_and_arrays():
    from_points = ConvexHull([Point(x, y) for x, y in UNIT_SQUARE])
    from_array = ConvexHull.from_points(np.array(UNIT_SQUARE, dtype=float), hull_id=2)

    assert from_points.vertices == from_array.vertices
    assert from_array.hull_id == 2


def test_hull_rejects_fewer_than_three_vertices():
    with pytest.raises(InvalidPolygonError):
        ConvexHull([(0, 0), (1, 1)], hull_id=9)

    with pytest.raises(ValueError, match="at least 3 vertices"):
        ConvexHull([])


def test_hull_collinear_vertices_have_zero_area():
    hull = ConvexHull([(0, 0), (1, 1), (2, 2)])
    assert hull.area == 0


def test_hull_is_immutable():
    hull = ConvexHull(UNIT_SQUARE)

    with pytest.raises(AttributeError):
        hull.area = 5.0

    array = hull.as_array()
    assert array.shape == (4, 2)
    with pytest.raises(ValueError):
        array[0, 0] = 10.0


def test_sort_vertices_and_shoelace_helpers():
    ordered = sort_vertices([Point(0, 1), Point(1, 0), Point(0, 0)])

    assert ordered == (Point(0, 0), Point(1, 0), Point(0, 1))
    assert shoelace_area(ordered) == pytest.approx(0.5)
    assert math.isclose(shoelace_area(ordered[::-1]), 0.5)


# ========== Point-in-Polygon ==========

def test_is_inside_interior_and_exterior():
    hull = ConvexHull(UNIT_SQUARE)

    assert is_inside(Point(0.5, 0.5), hull)
    assert not is_inside(Point(1.5, 0.5), hull)
    assert not is_inside(Point(-0.1, 0.5), hull)


def test_is_inside_boundary_points_are_outside():
    """
    Every vertex lies ON two of its own hull's edges, so the strict
    left-of test fails for at least one incident edge and the vertex is
    not reported inside. Points on an edge behave the same.
    """
    hull = ConvexHull(PENTAGON)

    for vertex in hull.vertices:
        assert not is_inside(vertex, hull)
        assert any(not is_left_of(vertex, edge) for edge in hull.edges)

    assert not is_inside(Point(1, 0), hull)
