"""
Rabbit Logger
=============

Bounded Context: Structured Application Logging over RabbitMQ

This package formats application log events as JSON documents and publishes
them to a durable RabbitMQ queue, from which they are ingested into
ClickHouse. It is a thin producer-side client: no buffering, no retries,
no batching.

Architecture:
- config: Immutable broker/queue/label configuration
- schemas/: LogLevel, LogRecord, Envelope
- publishers/: BasePublisher (connection lifecycle), LogClient
- logging/: Local JSON diagnostic sink for the client's own failures
- errors: Stage-identified exception hierarchy

Public API
----------
Config:
    LoggerConfig

Schemas:
    LogLevel, LogRecord, Envelope

Publishers:
    BasePublisher, LogClient

Logging:
    LogEvent, StructuredLogger, create_logger

Errors:
    RabbitLoggerError, BrokerConnectionError, SetupError,
    ChannelOpenError, QueueDeclareError, SerializationError,
    PublishError, ClientClosedError

Example:
    >>> from rabbit_logger import LogClient, LoggerConfig, LogRecord
    >>>
    >>> config = LoggerConfig.from_yaml("rabbit_logger.yaml")
    >>> with LogClient(config) as client:
    ...     client.info(LogRecord(
    ...         message="Test message",
    ...         action_name="TestAction",
    ...         action_stage="success",
    ...         transaction_id="12345",
    ...     ))

Published document:
    {"date": "2025-10-24", "dateTime": "2025-10-24 20:30:45",
     "timestamp": 1761319845, "environment": "development",
     "projectName": "ExampleProject", "logLevel": "INFO",
     "actionName": "TestAction", "actionStage": "success",
     "message": "Test message", "transactionId": "12345"}
"""

# Version
__version__ = "1.0.0"

# Config
from .config import LoggerConfig

# Schemas
from .schemas import (
    LogLevel,
    LogRecord,
    Envelope,
)

# Publishers
from .publishers import (
    BasePublisher,
    LogClient,
)

# Logging
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

# Errors
from .errors import (
    RabbitLoggerError,
    BrokerConnectionError,
    SetupError,
    ChannelOpenError,
    QueueDeclareError,
    SerializationError,
    PublishError,
    ClientClosedError,
)

__all__ = [
    # Version
    '__version__',
    # Config
    'LoggerConfig',
    # Schemas
    'LogLevel',
    'LogRecord',
    'Envelope',
    # Publishers
    'BasePublisher',
    'LogClient',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    # Errors
    'RabbitLoggerError',
    'BrokerConnectionError',
    'SetupError',
    'ChannelOpenError',
    'QueueDeclareError',
    'SerializationError',
    'PublishError',
    'ClientClosedError',
]
