"""
Common Schema Types
==================

Bounded Context: Shared Data Structures

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Serialization: to_dict() for JSON export
- Validation: from_dict() reports malformed input as SchemaValidationError

Types:
- Apex: One polygon vertex as stored on disk
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Any

from hullfilter_core.geometry.primitives import Point


class SchemaValidationError(ValueError):
    """Raised when a hull document does not match the expected schema."""


@dataclass(frozen=True)
class Apex:
    """
    Immutable polygon vertex record.

    Attributes:
        x: x-coordinate
        y: y-coordinate

    Invariants:
        - x and y are finite

    Example:
        >>> Apex(x=1.5, y=2.0).to_dict()
        {'x': 1.5, 'y': 2.0}
    """
    x: float
    y: float

    def __post_init__(self):
        """Validate invariants."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise SchemaValidationError(
                f"Apex coordinates must be finite, got ({self.x}, {self.y})"
            )

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Apex':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: x, y

        Returns:
            Apex instance

        Raises:
            SchemaValidationError: If keys are missing or values not numeric
        """
        try:
            return cls(x=_number(data['x']), y=_number(data['y']))
        except KeyError as e:
            raise SchemaValidationError(f"Missing required apex field: {e}")
        except TypeError as e:
            raise SchemaValidationError(f"Invalid apex data: {e}")

    @classmethod
    def from_point(cls, point: Point) -> 'Apex':
        return cls(x=point.x, y=point.y)

    def to_point(self) -> Point:
        return Point(self.x, self.y)


def _number(value: Any) -> float:
    # bool is an int subclass, but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)
