"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- str Enum, so values serialize straight into the JSON records
- Two-part names: <component>.<action>

Components: hull, filter, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - hull.*: Hull documents and per-hull decisions
    - filter.*: Overlap filter runs
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Hull Events ==========
    HULLS_LOADED = "hull.loaded"
    """Hull document read from disk."""

    HULLS_WRITTEN = "hull.written"
    """Filtered hull document written to disk."""

    HULL_KEPT = "hull.kept"
    """Hull survived the overlap filter."""

    HULL_DROPPED = "hull.dropped"
    """Hull overlap ratio exceeded the threshold."""

    HULL_DEGENERATE = "hull.degenerate"
    """Hull has zero area; its overlap ratio is undefined."""

    # ========== Filter Events ==========
    FILTER_STARTED = "filter.started"
    """Overlap filter run started."""

    FILTER_COMPLETED = "filter.completed"
    """Overlap filter run finished."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Run configuration loaded."""

    # ========== Error Events ==========
    INVALID_POLYGON_ERROR = "error.invalid_polygon"
    """Vertex list could not form a polygon."""

    SCHEMA_VALIDATION_ERROR = "error.schema_validation"
    """Hull document failed schema validation."""

    IO_ERROR = "error.io"
    """Reading or writing a hull document failed."""

    CONFIG_ERROR = "error.config"
    """Run configuration was rejected."""
