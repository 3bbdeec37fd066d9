"""
Structured JSON Logger
=====================

One JSON object per line on the ``figura.<component>`` logger:

    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "WARNING",
     "component": "decoder", "event": "decode.short_read",
     "message": "Source exhausted while reading parameters",
     "metadata": {"kind": 1, "offset": 4}}

Records still go through the standard ``logging`` module, so levels,
handlers and propagation (pytest's ``caplog`` included) behave as usual.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    Logger for one component of the decode pipeline.

    Example:
        >>> logger = StructuredLogger("registry")
        >>> logger.warning(
        ...     event=LogEvent.REGISTRY_DUPLICATE,
        ...     message="Kind already registered",
        ...     metadata={'kind': 0}
        ... )
    """

    def __init__(self, component: str, level: int = logging.INFO):
        self.component = component
        self.logger = logging.getLogger(f"figura.{component}")
        self.logger.setLevel(level)

        # one handler per component logger, shared by every instance
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _entry(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]],
        exc_info: Optional[Exception],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info:
            entry['exception'] = {'type': type(exc_info).__name__, 'message': str(exc_info)}
        return entry

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        levelno = getattr(logging, level)
        if not self.logger.isEnabledFor(levelno):
            return
        entry = self._entry(level, event, message, metadata, exc_info)
        self.logger.log(levelno, json.dumps(entry, default=str))

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('INFO', event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Recoverable failures: duplicate registration, short read, unknown kind."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """The exception's type and text are embedded in the JSON line, no traceback."""
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through: the message is already a JSON document."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    return StructuredLogger(component=component, level=level)
