"""
hullfilter I/O Package
======================

Bounded Context: Hull documents and observability

Architecture:
- logging/: Structured JSON logging
- schemas/: Immutable document records with validation
- store.py: JSON file reading and writing

Public API
----------
Logging:
    LogEvent, StructuredLogger, create_logger

Schemas:
    Apex, HullRecord, HullDocument, SchemaValidationError, InvalidHullError

Store:
    load_document, dump_document

Example:
    >>> from hullfilter_io import load_document, dump_document, HullDocument
    >>> document = load_document("convex_hulls.json")
    >>> hulls = document.to_hulls()
    >>> dump_document(HullDocument.from_hulls(hulls), "result_convex_hulls.json")
"""

__version__ = "1.0.0"

# Logging (imported first; hullfilter_core depends on it)
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

# Schemas
from .schemas import (
    INPUT_KEY,
    OUTPUT_KEY,
    Apex,
    HullDocument,
    HullRecord,
    InvalidHullError,
    SchemaValidationError,
)

# Store
from .store import (
    DEFAULT_INDENT,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    dump_document,
    load_document,
)

__all__ = [
    '__version__',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    # Schemas
    'INPUT_KEY',
    'OUTPUT_KEY',
    'Apex',
    'HullDocument',
    'HullRecord',
    'InvalidHullError',
    'SchemaValidationError',
    # Store
    'DEFAULT_INDENT',
    'DEFAULT_INPUT_PATH',
    'DEFAULT_OUTPUT_PATH',
    'dump_document',
    'load_document',
]
