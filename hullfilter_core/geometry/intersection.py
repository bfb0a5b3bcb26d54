"""
Convex Hull Intersection Module
===============================

Clipping of two convex polygons into their common region.

Design:
- Candidate vertices = boundary crossings + contained original vertices
- The intersection of convex polygons is convex, so re-sorting the
  candidates by angle (ConvexHull construction) traces its boundary
- No deduplication: coincident candidates may repeat, which leaves the
  shoelace area unchanged
"""

from typing import List, Optional

from hullfilter_core.geometry.containment import is_inside
from hullfilter_core.geometry.hull import ConvexHull
from hullfilter_core.geometry.primitives import Point, segment_intersection


def intersection_candidates(hull_a: ConvexHull, hull_b: ConvexHull) -> List[Point]:
    """
    Collect candidate vertices of the intersection polygon.

    Order: edge crossings (A edges x B edges), then vertices of A inside B,
    then vertices of B inside A.

    Args:
        hull_a: First convex hull
        hull_b: Second convex hull

    Returns:
        Candidate vertices, possibly with duplicates
    """
    candidates: List[Point] = []

    # |edges(A)| x |edges(B)| crossings
    for edge_a in hull_a.edges:
        for edge_b in hull_b.edges:
            crossing = segment_intersection(edge_a, edge_b)
            if crossing is not None:
                candidates.append(crossing)

    candidates.extend(v for v in hull_a.vertices if is_inside(v, hull_b))
    candidates.extend(v for v in hull_b.vertices if is_inside(v, hull_a))

    return candidates


def intersect(hull_a: ConvexHull, hull_b: ConvexHull) -> Optional[ConvexHull]:
    """
    Intersection region of two convex hulls.

    Args:
        hull_a: First convex hull
        hull_b: Second convex hull

    Returns:
        New ConvexHull (unset id) covering the common region, or None when
        fewer than 3 candidate vertices were found
    """
    candidates = intersection_candidates(hull_a, hull_b)
    if len(candidates) < 3:
        return None
    return ConvexHull(tuple(candidates))
