"""
Geometry Layer
==============

Bounded Context: Pure convex-polygon geometry.

Responsibilities:
- Point / Line value types and orientation predicates
- Convex hull representation (canonical CCW order, edges, area)
- Point-in-polygon tests
- Segment and convex-hull intersection
- NO state, NO logging, NO I/O

Design Philosophy:
- Pure functions over immutable values
- Fail-fast construction (InvalidPolygonError)
- Zero side effects
"""

from hullfilter_core.geometry.primitives import (
    Point,
    Line,
    is_left_of,
    segment_intersection,
)
from hullfilter_core.geometry.hull import (
    UNSET_HULL_ID,
    ConvexHull,
    InvalidPolygonError,
    shoelace_area,
    sort_vertices,
)
from hullfilter_core.geometry.containment import is_inside
from hullfilter_core.geometry.intersection import intersect, intersection_candidates

__all__ = [
    "Point",
    "Line",
    "is_left_of",
    "segment_intersection",
    "UNSET_HULL_ID",
    "ConvexHull",
    "InvalidPolygonError",
    "shoelace_area",
    "sort_vertices",
    "is_inside",
    "intersect",
    "intersection_candidates",
]
