"""
Hull Document Schemas
=====================

Bounded Context: On-disk hull documents

Document shape:

    {
        "convex hulls": [
            {"ID": 1, "apexes": [{"x": 0.0, "y": 0.0}, ...]},
            ...
        ]
    }

The filtered output uses the same record shape under "result convex hulls",
with apexes in the hull's canonical counter-clockwise order.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from hullfilter_core.geometry.hull import ConvexHull, InvalidPolygonError
from .common import Apex, SchemaValidationError

INPUT_KEY = "convex hulls"
OUTPUT_KEY = "result convex hulls"


class InvalidHullError(SchemaValidationError, InvalidPolygonError):
    """Hull record whose apexes cannot form a polygon."""
    pass


@dataclass(frozen=True)
class HullRecord:
    """
    Immutable hull record.

    Attributes:
        hull_id: Caller-supplied integer ID
        apexes: Vertices, in file order

    Invariants:
        - At least 3 apexes

    Example:
        >>> record = HullRecord.from_dict(
        ...     {"ID": 1, "apexes": [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 0, "y": 1}]}
        ... )
        >>> record.to_hull().area
        0.5
    """
    hull_id: int
    apexes: Tuple[Apex, ...]

    def __post_init__(self):
        """Validate invariants."""
        if len(self.apexes) < 3:
            raise InvalidHullError(
                f"Hull {self.hull_id} must have at least 3 apexes, "
                f"got {len(self.apexes)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'ID': self.hull_id,
            'apexes': [apex.to_dict() for apex in self.apexes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HullRecord':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: ID, apexes

        Returns:
            HullRecord instance

        Raises:
            SchemaValidationError: If fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise SchemaValidationError(
                f"Hull record must be an object, got {type(data).__name__}"
            )

        try:
            hull_id = data['ID']
            apexes_data = data['apexes']
        except KeyError as e:
            raise SchemaValidationError(f"Missing required hull field: {e}")

        if isinstance(hull_id, bool) or not isinstance(hull_id, int):
            raise SchemaValidationError(f"Hull ID must be an integer, got {hull_id!r}")
        if not isinstance(apexes_data, list):
            raise SchemaValidationError(f"Hull {hull_id} apexes must be a list")

        try:
            apexes = tuple(Apex.from_dict(apex) for apex in apexes_data)
        except SchemaValidationError as e:
            raise SchemaValidationError(f"Hull {hull_id}: {e}") from e

        return cls(hull_id=hull_id, apexes=apexes)

    @classmethod
    def from_hull(cls, hull: ConvexHull) -> 'HullRecord':
        """Record for a hull, apexes in canonical order."""
        return cls(
            hull_id=hull.hull_id,
            apexes=tuple(Apex.from_point(v) for v in hull.vertices),
        )

    def to_hull(self) -> ConvexHull:
        """
        Build the ConvexHull for this record.

        Raises:
            InvalidHullError: If the apexes cannot form a polygon
        """
        try:
            return ConvexHull(
                tuple(apex.to_point() for apex in self.apexes),
                hull_id=self.hull_id,
            )
        except InvalidPolygonError as e:
            raise InvalidHullError(f"Hull {self.hull_id}: {e}") from e


@dataclass(frozen=True)
class HullDocument:
    """
    Immutable collection of hull records, in document order.

    Attributes:
        records: Hull records
    """
    records: Tuple[HullRecord, ...]

    @property
    def hull_count(self) -> int:
        return len(self.records)

    def to_dict(self, key: str = OUTPUT_KEY) -> Dict[str, Any]:
        """Serialize under the given top-level key."""
        return {key: [record.to_dict() for record in self.records]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], key: str = INPUT_KEY) -> 'HullDocument':
        """Deserialize from dict.

        Args:
            data: Parsed JSON document
            key: Top-level key holding the hull list

        Returns:
            HullDocument instance

        Raises:
            SchemaValidationError: If the key is missing or records malformed
        """
        if not isinstance(data, dict):
            raise SchemaValidationError("Hull document must be a JSON object")
        if key not in data:
            raise SchemaValidationError(f"Hull document has no '{key}' field")
        if not isinstance(data[key], list):
            raise SchemaValidationError(f"'{key}' must be a list of hulls")

        return cls(records=tuple(HullRecord.from_dict(item) for item in data[key]))

    @classmethod
    def from_hulls(cls, hulls: Sequence[ConvexHull]) -> 'HullDocument':
        return cls(records=tuple(HullRecord.from_hull(hull) for hull in hulls))

    def to_hulls(self) -> List[ConvexHull]:
        return [record.to_hull() for record in self.records]
