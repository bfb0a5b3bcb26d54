"""
hullfilter Schemas
==================

Bounded Context: Data Structures

Design:
- Frozen dataclasses (immutability)
- to_dict() for JSON serialization
- from_dict() for deserialization with schema validation

Public API
----------
    Apex: One vertex record
    HullRecord: One hull (ID + apexes)
    HullDocument: Ordered collection of hull records
    SchemaValidationError: Malformed document
    InvalidHullError: Record whose apexes cannot form a polygon
"""

from .common import Apex, SchemaValidationError
from .hull import INPUT_KEY, OUTPUT_KEY, HullDocument, HullRecord, InvalidHullError

__all__ = [
    'Apex',
    'SchemaValidationError',
    'INPUT_KEY',
    'OUTPUT_KEY',
    'HullDocument',
    'HullRecord',
    'InvalidHullError',
]
