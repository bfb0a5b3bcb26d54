"""
Geometric Primitives Module
===========================

Pure value types and predicates - NO state, NO side effects.

Design:
- Immutable points and directed lines (frozen dataclass pattern)
- Cross product for side calculation
- Parametric solution for segment intersection
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Point:
    """
    Immutable 2-D point.

    Attributes:
        x: x-coordinate
        y: y-coordinate
    """

    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def cross(self, other: "Point") -> float:
        """z-component of the cross product, treating both points as vectors."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Line:
    """
    Immutable directed segment.

    Direction matters: the left side of a line is the side a point falls on
    when the cross product (end - start) x (point - start) is positive.

    Attributes:
        start: Segment start point
        end: Segment end point
    """

    start: Point
    end: Point


def is_left_of(point: Point, line: Line) -> bool:
    """
    Check whether a point lies strictly to the left of a directed line.

    Points on the line itself are NOT left of it.

    Args:
        point: Point to test
        line: Directed line

    Returns:
        True if cross product (end - start) x (point - start) > 0
    """
    direction = line.end - line.start
    to_point = point - line.start
    return direction.cross(to_point) > 0


def segment_intersection(line1: Line, line2: Line) -> Optional[Point]:
    """
    Intersection point of two line segments.

    Solves the parametric system A1 + uA (A2 - A1) = B1 + uB (B2 - B1).
    Parallel and collinear segments (zero determinant) report no
    intersection, even when collinear segments overlap.

    Args:
        line1: First segment (A)
        line2: Second segment (B)

    Returns:
        The intersection point if 0 <= uA <= 1 and 0 <= uB <= 1, else None.
        Hits at exactly uA or uB in {0, 1} return that endpoint as is.
    """
    ax1, ay1 = line1.start.x, line1.start.y
    ax2, ay2 = line1.end.x, line1.end.y
    bx1, by1 = line2.start.x, line2.start.y
    bx2, by2 = line2.end.x, line2.end.y

    d = (by2 - by1) * (ax2 - ax1) - (bx2 - bx1) * (ay2 - ay1)
    if d == 0:
        return None

    u_a = ((bx2 - bx1) * (ay1 - by1) - (by2 - by1) * (ax1 - bx1)) / d
    u_b = ((ax2 - ax1) * (ay1 - by1) - (ay2 - ay1) * (ax1 - bx1)) / d

    if not (0 <= u_a <= 1 and 0 <= u_b <= 1):
        return None

    # Exact endpoints, so shared corners compare equal
    if u_a == 0:
        return line1.start
    if u_a == 1:
        return line1.end
    if u_b == 0:
        return line2.start
    if u_b == 1:
        return line2.end

    return Point(ax1 + u_a * (ax2 - ax1), ay1 + u_a * (ay2 - ay1))
