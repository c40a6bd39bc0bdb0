"""
Structured JSON Logger
=====================

Bounded Context: Diagnostic Sink

Local sink for the log client's own problems: refused connections, dropped
publishes, close failures. Nothing written here goes to RabbitMQ.

Design:
- Event fields travel on the LogRecord (``extra``), so any handler can
  read them; JSONFormatter renders them as one object per line
- Thread-safe (uses standard logging module)
- Type-safe events (LogEvent enum)

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "WARNING",
     "component": "client", "event": "config.timezone_fallback",
     "message": "Unknown timezone 'Mars/Base', using UTC",
     "metadata": {"timezone": "Mars/Base"}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent


class StructuredLogger:
    """
    Event-oriented facade over a standard library logger.

    Attributes:
        component: Component name stamped on every entry
        logger: Underlying ``logging.Logger`` (``rabbit_logger.<component>``)

    Example:
        >>> sink = StructuredLogger("client")
        >>> sink.warning(
        ...     event=LogEvent.TIMEZONE_FALLBACK,
        ...     message="Unknown timezone 'Mars/Base', using UTC",
        ...     metadata={'timezone': 'Mars/Base'}
        ... )
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger = logging.getLogger(logger_name or f"rabbit_logger.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]],
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(
            level,
            json.dumps(entry, default=str),
            exc_info=exc_info,
            extra={'structured': entry},
        )

    def debug(self, event: LogEvent, message: str,
              metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str,
                metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Record a failure.

        ``exc_info`` is summarized into the ``exception`` field and its
        traceback, if any, follows the JSON line.
        """
        self._emit(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Render StructuredLogger entries as JSON.

    Records from plain ``logging`` calls are wrapped into the same shape so
    the stream stays parseable.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, 'structured', None)
        if entry is None:
            entry = {
                'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
                'level': record.levelname,
                'component': record.name,
                'message': record.getMessage(),
            }

        line = json.dumps(entry, default=str)
        if record.exc_info and record.exc_info[2] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def create_logger(
    component: str = "client",
    level: int = logging.INFO
) -> StructuredLogger:
    """Create the default diagnostic sink for a component."""
    return StructuredLogger(component=component, level=level)
