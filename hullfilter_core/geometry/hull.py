"""
Convex Hull Module
==================

Immutable convex polygon with canonical vertex order.

Design:
- Frozen dataclass; derived fields set once in __post_init__
- Vertices re-sorted counter-clockwise around the centroid on every
  construction, so any permutation of the same polygon is equivalent
- Fail-fast: fewer than 3 vertices is an InvalidPolygonError, never an
  empty hull
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from hullfilter_core.geometry.primitives import Line, Point

UNSET_HULL_ID = -1
"""Id carried by hulls built internally (intersection regions)."""

VertexLike = Union[Point, Sequence[float]]


class InvalidPolygonError(ValueError):
    """Raised when a vertex list cannot form a polygon."""


def _as_point(vertex: VertexLike) -> Point:
    if isinstance(vertex, Point):
        return vertex
    return Point(float(vertex[0]), float(vertex[1]))


def _coordinates(vertices: Sequence[Point]) -> np.ndarray:
    return np.array([(v.x, v.y) for v in vertices], dtype=float)


def sort_vertices(vertices: Sequence[Point]) -> Tuple[Point, ...]:
    """
    Order vertices counter-clockwise by angle around their centroid.

    Ties (coincident points) keep their input order.

    Args:
        vertices: Unordered vertices of a convex polygon

    Returns:
        Vertices sorted by ascending atan2 angle from the centroid
    """
    coords = _coordinates(vertices)
    cx, cy = coords.mean(axis=0)
    angles = np.arctan2(coords[:, 1] - cy, coords[:, 0] - cx)
    order = np.argsort(angles, kind="stable")
    return tuple(vertices[i] for i in order)


def build_edges(vertices: Sequence[Point]) -> Tuple[Line, ...]:
    """Consecutive vertex pairs plus the closing edge (last -> first)."""
    count = len(vertices)
    return tuple(
        Line(vertices[i], vertices[(i + 1) % count]) for i in range(count)
    )


def shoelace_area(vertices: Sequence[Point]) -> float:
    """
    Polygon area from ordered vertices (Shoelace formula).

    https://en.wikipedia.org/wiki/Shoelace_formula
    """
    coords = _coordinates(vertices)
    x, y = coords[:, 0], coords[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)
    return 0.5 * abs(float(np.sum(x * y_next - x_next * y)))


@dataclass(frozen=True)
class ConvexHull:
    """
    Immutable convex polygon.

    Design:
    - Canonical CCW vertex order (angle around centroid)
    - Edges directed with that order, so the polygon interior is to the
      left of every edge
    - Area derived once at construction

    Attributes:
        vertices: Polygon vertices (any order on input, CCW after init)
        hull_id: Caller id; UNSET_HULL_ID for computed regions
        edges: Derived directed boundary segments
        area: Derived non-negative area
        centroid: Arithmetic mean of the vertices

    Raises:
        InvalidPolygonError: If fewer than 3 vertices are supplied

    Example:
        >>> hull = ConvexHull([(0, 0), (0, 1), (1, 1), (1, 0)], hull_id=7)
        >>> hull.area
        1.0
    """

    vertices: Tuple[Point, ...]
    hull_id: int = UNSET_HULL_ID
    edges: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    area: float = field(init=False, compare=False)
    centroid: Point = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Canonicalize vertices and derive edges and area."""
        points = [_as_point(v) for v in self.vertices]
        if len(points) < 3:
            raise InvalidPolygonError(
                f"Convex hull {self.hull_id} must have at least 3 vertices, "
                f"got {len(points)}"
            )

        ordered = sort_vertices(points)
        coords = _coordinates(ordered)
        cx, cy = coords.mean(axis=0)

        # object.__setattr__ for frozen dataclass
        object.__setattr__(self, "vertices", ordered)
        object.__setattr__(self, "edges", build_edges(ordered))
        object.__setattr__(self, "area", shoelace_area(ordered))
        object.__setattr__(self, "centroid", Point(float(cx), float(cy)))

    @classmethod
    def from_points(
        cls, points: Iterable[VertexLike], hull_id: int = UNSET_HULL_ID
    ) -> "ConvexHull":
        """Build a hull from (x, y) pairs, Points or an Nx2 array."""
        return cls(tuple(points), hull_id=hull_id)

    def as_array(self) -> np.ndarray:
        """
        Vertices as a read-only Nx2 array in canonical order.

        Returns:
            float array of shape (len(vertices), 2)
        """
        coords = _coordinates(self.vertices)
        coords.flags.writeable = False
        return coords

    def __len__(self) -> int:
        """Number of vertices."""
        return len(self.vertices)
