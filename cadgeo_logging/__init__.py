"""
Structured Logging for cadgeo
=============================

Bounded Context: Observability

JSON-structured logging shared by the engine, the canvas and the editor.

Design:
- JSON output (one object per line)
- Typed events (enums prevent typos)
- Contextual metadata (shape_id, backend, operation, etc.)

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from cadgeo_logging import create_logger, LogEvent
    >>> logger = create_logger("engine")
    >>> logger.info(
    ...     event=LogEvent.BACKEND_LOADED,
    ...     message="Performance backend ready",
    ...     metadata={'backend': 'vectorized'}
    ... )

Output:
    {
        "timestamp": "2026-10-16T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "engine",
        "event": "backend.loaded",
        "message": "Performance backend ready",
        "metadata": {"backend": "vectorized"}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
