"""
hullfilter Core
===============

Bounded Context: Convex hull overlap filtering.

Design Philosophy:
- Separation of Concerns: geometry and analytics separated
- Immutable hulls, pure geometry functions
- Fail Fast: invalid polygons rejected at construction

Architecture:

    hullfilter_core/
    ├── geometry/            # Pure geometry (immutable, stateless)
    │   ├── primitives.py    # Point, Line, is_left_of, segment_intersection
    │   ├── hull.py          # ConvexHull
    │   ├── containment.py   # is_inside
    │   └── intersection.py  # intersect
    │
    └── analytics/           # Overlap accounting
        ├── overlap.py       # overlap_ratio, OverlapFilter, OverlapReport
        └── detections.py    # DetectionHullFilter (supervision adapter)

Usage:

    from hullfilter_core import ConvexHull, OverlapFilter

    hulls = [
        ConvexHull([(0, 0), (1, 0), (1, 1), (0, 1)], hull_id=1),
        ConvexHull([(0.1, 0), (1.1, 0), (1.1, 1), (0.1, 1)], hull_id=2),
        ConvexHull([(5, 5), (6, 5), (6, 6), (5, 6)], hull_id=3),
    ]
    survivors = OverlapFilter(threshold=0.5).filter(hulls)  # hull 3 only
"""

# Geometry Layer (immutable, stateless)
from hullfilter_core.geometry import (
    UNSET_HULL_ID,
    ConvexHull,
    InvalidPolygonError,
    Line,
    Point,
    intersect,
    is_inside,
    is_left_of,
    segment_intersection,
)

# Analytics Layer
from hullfilter_core.analytics import (
    DEFAULT_OVERLAP_THRESHOLD,
    DetectionHullFilter,
    HullDecision,
    OverlapFilter,
    OverlapReport,
    filter_hulls,
    overlap_ratio,
)

__all__ = [
    # Geometry
    "UNSET_HULL_ID",
    "ConvexHull",
    "InvalidPolygonError",
    "Line",
    "Point",
    "intersect",
    "is_inside",
    "is_left_of",
    "segment_intersection",
    # Analytics
    "DEFAULT_OVERLAP_THRESHOLD",
    "DetectionHullFilter",
    "HullDecision",
    "OverlapFilter",
    "OverlapReport",
    "filter_hulls",
    "overlap_ratio",
]

__version__ = "1.0.0"
