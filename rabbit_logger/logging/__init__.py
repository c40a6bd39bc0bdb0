"""
Diagnostic Logging for Rabbit Logger
====================================

Bounded Context: Observability

The log client publishes application logs to RabbitMQ; its own problems
(connection failures, dropped messages, close errors) go to this local
JSON sink instead.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Output:
    {
        "timestamp": "2025-10-24T15:30:45.123456+00:00",
        "level": "ERROR",
        "component": "client",
        "event": "error.publish",
        "message": "Failed to send log to queue",
        "metadata": {"queue": "log-queue", "log_level": "INFO"}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
