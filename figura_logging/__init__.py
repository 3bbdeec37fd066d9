"""
Structured Logging for figura
=============================

Bounded Context: Observability

JSON-structured logging shared by the factory, the decoder and the runner.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from figura_logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="decoder")
    >>> logger.info(
    ...     event=LogEvent.DECODE_SUCCEEDED,
    ...     message="Decoded circle",
    ...     metadata={'kind': 0, 'param_count': 3}
    ... )

Output:
    {"timestamp": "...", "level": "INFO", "component": "decoder",
     "event": "decode.succeeded", "message": "Decoded circle",
     "metadata": {"kind": 0, "param_count": 3}}
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
