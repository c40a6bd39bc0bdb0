"""
Log Client
==========

Bounded Context: Application Log Production

This module provides the publisher that turns application log records into
JSON documents on a RabbitMQ queue, for ingestion into ClickHouse.

Design:
- Inherits from BasePublisher (connection management)
- Envelope (date, dateTime, timestamp, environment, projectName, logLevel)
  merged with the caller's record; record keys win on collision
- Fire-and-forget severity methods: failures go to the diagnostic logger,
  never to the caller

Message Flow:
    LogRecord → Envelope + merge → JSON → default exchange → queue

Example:
    >>> from rabbit_logger import LogClient, LoggerConfig, LogRecord
    >>>
    >>> config = LoggerConfig(
    ...     hostname="localhost", port=5672,
    ...     username="guest", password="guest", vhost="/",
    ...     queue="log-queue", env="development",
    ...     project_name="ExampleProject",
    ... )
    >>> with LogClient(config) as client:
    ...     client.info(LogRecord(
    ...         message="Test message",
    ...         action_name="TestAction",
    ...         action_stage="success",
    ...         transaction_id="12345",
    ...     ))
"""

from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Mapping, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .base import BasePublisher, ConnectionFactory
from ..config import LoggerConfig
from ..errors import (
    ClientClosedError,
    PublishError,
    RabbitLoggerError,
    SerializationError,
)
from ..logging import LogEvent, StructuredLogger, create_logger
from ..schemas import Envelope, LogLevel, LogRecord

RecordLike = Union[LogRecord, Mapping[str, Any]]

_ERROR_EVENTS = {
    SerializationError: LogEvent.SERIALIZATION_ERROR,
    PublishError: LogEvent.PUBLISH_ERROR,
    ClientClosedError: LogEvent.CLIENT_CLOSED_ERROR,
}


def resolve_timezone(name: str, logger: StructuredLogger) -> tzinfo:
    """
    Look up ``name`` in the tz database, falling back to UTC.

    Missing zones, malformed keys and tz-database directory names such as
    ``America`` all resolve to UTC with one warning.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning(
            event=LogEvent.TIMEZONE_FALLBACK,
            message=f"Unknown timezone {name!r}, using UTC",
            metadata={'timezone': name, 'reason': str(e)}
        )
        return timezone.utc


class LogClient(BasePublisher):
    """
    Structured log publisher for RabbitMQ.

    Attributes:
        Same as BasePublisher, plus:
        tz: Timezone used for the envelope's date fields

    Example:
        >>> client = LogClient(config, logger=create_logger("billing"))
        >>> client.error({"message": "Charge declined", "requestId": "r-1"})
        True
        >>> client.close()
    """

    def __init__(
        self,
        config: LoggerConfig,
        logger: Optional[StructuredLogger] = None,
        connection_factory: Optional[ConnectionFactory] = None
    ):
        logger = logger or create_logger()
        self.tz = resolve_timezone(config.timezone, logger)
        super().__init__(
            config=config,
            logger=logger,
            connection_factory=connection_factory
        )

    def build_envelope(
        self,
        log_level: LogLevel,
        now: Optional[datetime] = None
    ) -> Envelope:
        """Build the contextual fields for one log call."""
        return Envelope.build(
            log_level=log_level,
            tz=self.tz,
            environment=self.config.env,
            project_name=self.config.project_name,
            now=now
        )

    def format_message(
        self,
        log_level: LogLevel,
        record: RecordLike,
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Merge the envelope with the caller's record.

        Keys present in the record overwrite envelope keys of the same
        name; keys unique to either side are kept.

        Raises:
            SerializationError: ``record`` is not a valid log record, or
                ``log_level`` is not a LogLevel value
        """
        try:
            log_level = LogLevel(log_level)
        except ValueError as e:
            raise SerializationError(f"unknown log level: {log_level!r}") from e

        try:
            if not isinstance(record, LogRecord):
                record = LogRecord.from_dict(record)
            data = record.to_dict()
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(f"failed to marshal data: {e}") from e

        payload = self.build_envelope(log_level, now=now).to_dict()
        payload.update(data)
        return payload

    def send(self, log_level: LogLevel, record: RecordLike) -> None:
        """
        Format and publish one log record.

        Unlike the severity methods, this raises on failure.

        Raises:
            SerializationError: Unknown level, or record or payload could
                not be serialized
            ClientClosedError: close() was already called
            PublishError: The transport failed during send
        """
        self.publish(self.format_message(log_level, record))
        self.logger.debug(
            event=LogEvent.LOG_PUBLISHED,
            message="Published log",
            metadata={'queue': self.config.queue, 'log_level': LogLevel(log_level).value}
        )

    def _dispatch(self, log_level: LogLevel, record: RecordLike) -> bool:
        try:
            self.send(log_level, record)
            return True
        except RabbitLoggerError as e:
            with self._stats_lock:
                self._failed_count += 1
            self.logger.error(
                event=_ERROR_EVENTS.get(type(e), LogEvent.PUBLISH_ERROR),
                message="Failed to send log to queue",
                exc_info=e,
                metadata={'queue': self.config.queue, 'log_level': log_level.value}
            )
            return False

    def info(self, record: RecordLike) -> bool:
        """Publish ``record`` with level ``INFO``. Never raises."""
        return self._dispatch(LogLevel.INFO, record)

    def error(self, record: RecordLike) -> bool:
        """Publish ``record`` with level ``Error``. Never raises."""
        return self._dispatch(LogLevel.ERROR, record)

    def warning(self, record: RecordLike) -> bool:
        """Publish ``record`` with level ``Warning``. Never raises."""
        return self._dispatch(LogLevel.WARNING, record)

    def debug(self, record: RecordLike) -> bool:
        """Publish ``record`` with level ``DEBUG``. Never raises."""
        return self._dispatch(LogLevel.DEBUG, record)
