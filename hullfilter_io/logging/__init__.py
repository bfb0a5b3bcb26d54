"""
Structured Logging for hullfilter
=================================

Bounded Context: Observability

Design:
- One JSON object per line on stderr
- LogEvent names every record (hull.*, filter.*, config.*, error.*)
- Metadata carries hull_id, ratio, path

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from hullfilter_io.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="filter")
    >>> logger.info(
    ...     event=LogEvent.FILTER_STARTED,
    ...     message="Filtering convex hulls",
    ...     metadata={'hull_count': 12}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
