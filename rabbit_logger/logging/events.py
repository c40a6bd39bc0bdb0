"""
Structured Log Event Types
==========================

Bounded Context: Diagnostic Event Taxonomy

This module defines typed event names for the client's own diagnostics.
These are written to the local log sink, never to the broker queue.

Event Naming Convention:
    <category>.<action>

    category: broker, log, config, error
    action: connected, published, timezone_fallback, ...

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.queue
    | filter event = "error.publish"
    | stats count() by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed diagnostic event names.

    Categories:
    - broker.*: Connection lifecycle
    - log.*: Publication of application logs
    - config.*: Configuration resolution
    - error.*: Failures, one per error stage
    """

    # ========== Broker Events ==========
    BROKER_CONNECTED = "broker.connected"
    """Connection, channel and queue are ready."""

    BROKER_DISCONNECTED = "broker.disconnected"
    """Channel and connection released."""

    # ========== Log Events ==========
    LOG_PUBLISHED = "log.published"
    """Application log published to the queue."""

    # ========== Config Events ==========
    TIMEZONE_FALLBACK = "config.timezone_fallback"
    """Configured timezone unknown, UTC used instead."""

    # ========== Error Events ==========
    BROKER_CONNECTION_ERROR = "error.broker_connection"
    """Failed to connect to the broker."""

    CHANNEL_OPEN_ERROR = "error.channel_open"
    """Failed to open a channel on the connection."""

    QUEUE_DECLARE_ERROR = "error.queue_declare"
    """Failed to declare the target queue."""

    SERIALIZATION_ERROR = "error.serialization"
    """Failed to serialize a log payload to JSON."""

    PUBLISH_ERROR = "error.publish"
    """Transport failure while publishing."""

    RELEASE_ERROR = "error.release"
    """Failed to close the channel or connection."""

    CLIENT_CLOSED_ERROR = "error.client_closed"
    """Publish attempted on a closed client."""


BROKER_EVENTS = {
    LogEvent.BROKER_CONNECTED,
    LogEvent.BROKER_DISCONNECTED,
}

ERROR_EVENTS = {
    LogEvent.BROKER_CONNECTION_ERROR,
    LogEvent.CHANNEL_OPEN_ERROR,
    LogEvent.QUEUE_DECLARE_ERROR,
    LogEvent.SERIALIZATION_ERROR,
    LogEvent.PUBLISH_ERROR,
    LogEvent.RELEASE_ERROR,
    LogEvent.CLIENT_CLOSED_ERROR,
}
