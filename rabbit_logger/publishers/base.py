"""
Base RabbitMQ Publisher
=======================

Bounded Context: AMQP Infrastructure

This module provides the abstract base class for RabbitMQ publishers.

Design:
- Connection lifecycle owned by the instance (open in __init__, close once)
- One blocking connection, one channel, one durable queue
- Publish and close serialized by a lock (safe to share across threads)
- Structured logging integration

Architecture:
    BasePublisher (abstract)
        ↓
    LogClient (concrete)

Responsibilities:
- Connect, open channel, declare queue (fail closed, no leaks)
- JSON serialization and basic_publish to the default exchange
- Best-effort release
- NOT responsible for: Message formatting (delegated to subclasses)

State machine:
    Unopened --__init__--> Open --close()--> Closed (terminal)
"""

import json
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

import pika
from pika.exceptions import AMQPError

from ..config import LoggerConfig
from ..errors import (
    BrokerConnectionError,
    ChannelOpenError,
    ClientClosedError,
    PublishError,
    QueueDeclareError,
    SerializationError,
)
from ..logging import LogEvent, StructuredLogger, create_logger

CONTENT_TYPE_JSON = "application/json"
DEFAULT_EXCHANGE = ""

ConnectionFactory = Callable[[pika.connection.Parameters], Any]


class BasePublisher(ABC):
    """
    Abstract base class for RabbitMQ publishers.

    Opens the connection, channel and queue on construction; if any stage
    fails, whatever was already opened is closed and a stage-specific
    error is raised, so no half-open publisher is ever returned.

    Attributes:
        config: Immutable broker and queue configuration
        logger: Diagnostic sink
        connection: Broker connection (owned)
        channel: Channel on ``connection`` (owned)

    Thread Safety:
        publish() and close() hold the same lock; pika's BlockingChannel is
        not thread-safe on its own.
    """

    def __init__(
        self,
        config: LoggerConfig,
        logger: Optional[StructuredLogger] = None,
        connection_factory: Optional[ConnectionFactory] = None
    ):
        """
        Connect to the broker and declare the queue.

        Args:
            config: Broker and queue configuration
            logger: Diagnostic sink (default: create_logger())
            connection_factory: Callable taking pika connection parameters
                and returning a connection (default: pika.BlockingConnection)

        Raises:
            BrokerConnectionError: Broker unreachable or credentials rejected
            ChannelOpenError: Channel could not be opened
            QueueDeclareError: Queue declaration rejected
        """
        self.config = config
        self.logger = logger or create_logger()
        self._connection_factory = connection_factory or pika.BlockingConnection

        self._lock = threading.Lock()
        self._stats_lock = threading.Lock()
        self._closed = False
        self._published_count = 0
        self._failed_count = 0

        self.connection = None
        self.channel = None
        self._open()

    def _open(self) -> None:
        metadata = {'broker': self.config.broker, 'queue': self.config.queue}

        try:
            parameters = pika.URLParameters(self.config.url)
            connection = self._connection_factory(parameters)
        except (AMQPError, OSError, ValueError) as e:
            self.logger.error(
                event=LogEvent.BROKER_CONNECTION_ERROR,
                message="Failed to connect to RabbitMQ",
                exc_info=e,
                metadata=metadata
            )
            raise BrokerConnectionError(
                f"failed to connect to RabbitMQ at {self.config.broker}: {e}"
            ) from e

        try:
            channel = connection.channel()
        except (AMQPError, OSError) as e:
            self.logger.error(
                event=LogEvent.CHANNEL_OPEN_ERROR,
                message="Failed to open a channel",
                exc_info=e,
                metadata=metadata
            )
            self._release(None, connection)
            raise ChannelOpenError(f"failed to open a channel: {e}") from e

        try:
            channel.queue_declare(
                queue=self.config.queue,
                durable=True,
                exclusive=False,
                auto_delete=False,
                arguments=None
            )
        except (AMQPError, OSError) as e:
            self.logger.error(
                event=LogEvent.QUEUE_DECLARE_ERROR,
                message="Failed to declare a queue",
                exc_info=e,
                metadata=metadata
            )
            self._release(channel, connection)
            raise QueueDeclareError(
                f"failed to declare queue {self.config.queue!r}: {e}"
            ) from e

        self.connection = connection
        self.channel = channel
        self.logger.info(
            event=LogEvent.BROKER_CONNECTED,
            message="Connected to RabbitMQ (ClickHouse Logger).",
            metadata=metadata
        )

    def _release(self, channel: Any, connection: Any) -> None:
        """Close channel then connection, recording failures instead of raising."""
        for name, resource in (("channel", channel), ("connection", connection)):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                self.logger.error(
                    event=LogEvent.RELEASE_ERROR,
                    message=f"Failed to close RabbitMQ {name}",
                    exc_info=e,
                    metadata={'broker': self.config.broker}
                )

    def close(self) -> None:
        """
        Release the channel, then the connection.

        Best-effort and idempotent: close failures go to the diagnostic
        sink, and calls after the first return immediately.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._release(self.channel, self.connection)

        stats = self.get_stats()
        self.logger.info(
            event=LogEvent.BROKER_DISCONNECTED,
            message="Disconnected from RabbitMQ",
            metadata={
                'broker': stats['broker'],
                'published_count': stats['published_count'],
                'failed_count': stats['failed_count']
            }
        )

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @abstractmethod
    def format_message(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Format message for publication.

        Returns:
            Dictionary ready for JSON serialization
        """
        raise NotImplementedError("Subclasses must implement format_message()")

    def publish(self, message_data: Dict[str, Any]) -> None:
        """
        Publish a message to the configured queue.

        Sends through the default exchange with the queue name as routing
        key, non-mandatory, content type ``application/json``.

        Args:
            message_data: Message dictionary (already formatted)

        Raises:
            SerializationError: message_data is not JSON-serializable
            ClientClosedError: close() was already called
            PublishError: The transport failed during send
        """
        try:
            body = json.dumps(message_data, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"failed to marshal final payload: {e}") from e

        with self._lock:
            if self._closed:
                raise ClientClosedError("cannot publish: client is closed")

            try:
                self.channel.basic_publish(
                    exchange=DEFAULT_EXCHANGE,
                    routing_key=self.config.queue,
                    body=body,
                    properties=pika.BasicProperties(content_type=CONTENT_TYPE_JSON),
                    mandatory=False
                )
            except (AMQPError, OSError) as e:
                raise PublishError(
                    f"failed to publish to queue {self.config.queue!r}: {e}"
                ) from e

        with self._stats_lock:
            self._published_count += 1

    def get_stats(self) -> Dict[str, Any]:
        """
        Get publisher statistics.

        Example:
            >>> stats = client.get_stats()
            >>> print(f"Published {stats['published_count']} logs")
        """
        with self._stats_lock:
            return {
                'published_count': self._published_count,
                'failed_count': self._failed_count,
                'closed': self._closed,
                'queue': self.config.queue,
                'broker': self.config.broker
            }
