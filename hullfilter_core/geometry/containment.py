"""
Point-in-Polygon Module
=======================

Half-plane containment test for convex hulls.

Valid only because ConvexHull edges are CCW by construction: the
interior lies to the left of every edge.
"""

from hullfilter_core.geometry.hull import ConvexHull
from hullfilter_core.geometry.primitives import Point, is_left_of


def is_inside(point: Point, hull: ConvexHull) -> bool:
    """
    Check if a point is strictly inside a convex hull.

    Boundary points (on an edge or at a vertex) are NOT inside.

    Args:
        point: Point to test
        hull: Convex hull with CCW edges

    Returns:
        True if point is left of every edge of hull
    """
    return all(is_left_of(point, edge) for edge in hull.edges)
