"""
Structured JSON Logger
======================

One JSON object per log line for hull loading, filter runs and CLI errors.

Design:
- Wraps a stdlib logger named hullfilter.<component>
- Events come from LogEvent; free text goes in message
- Per-hull metadata (hull_id, ratio) is only serialized when the level is
  enabled, so DEBUG decisions cost nothing on large inputs

Example:
    >>> logger = create_logger("filter")
    >>> logger.info(
    ...     event=LogEvent.FILTER_COMPLETED,
    ...     message="Filtered convex hulls",
    ...     metadata={'kept': 3, 'dropped': 2}
    ... )

Output:
    {"timestamp": "2026-10-18T09:30:45.123456+00:00", "level": "INFO",
     "component": "filter", "event": "filter.completed",
     "message": "Filtered convex hulls", "metadata": {"kept": 3, "dropped": 2}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON logger for one hullfilter component.

    The filter logs to component "filter", the CLI and document store to
    "cli". Records still propagate to the root logger, so pytest's caplog
    and any host application handlers see them.

    Attributes:
        component: Component name written into every record
        logger: Underlying stdlib logger (hullfilter.<component>)
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Args:
            component: Component name ("filter", "cli")
            level: Logging level (default: INFO)
            logger_name: Override for the stdlib logger name
        """
        self.component = component
        self.logger_name = logger_name or f"hullfilter.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        # One JSON handler per stdlib logger, however many wrappers share it
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # default=str covers Path values and numpy scalars in metadata
        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Per-hull keep/drop decisions."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Run milestones: config loaded, documents read and written, filter summary."""
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Recoverable oddities, such as a zero-area hull.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.HULL_DEGENERATE,
            ...     message="Hull has zero area",
            ...     metadata={'hull_id': 4, 'ratio': 0.0, 'kept': True}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Failures that end a command.

        Args:
            event: One of the error.* events
            message: Human-readable message
            metadata: Additional context (command, path)
            exc_info: Exception whose type and message are recorded

        Example:
            >>> try:
            ...     load_document("convex_hulls.json")
            ... except FileNotFoundError as e:
            ...     logger.error(
            ...         event=LogEvent.IO_ERROR,
            ...         message="Command failed",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """Emits the record message as is; StructuredLogger already built the JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    StructuredLogger for a hullfilter component.

    Example:
        >>> logger = create_logger("filter", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
