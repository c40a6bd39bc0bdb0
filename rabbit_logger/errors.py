"""
Rabbit Logger Errors
====================

Bounded Context: Failure Taxonomy

Every failure raised by this package derives from RabbitLoggerError and
names the stage that failed, so callers can tell a refused connection from
a rejected queue declaration without parsing messages.

Hierarchy:
    RabbitLoggerError
        BrokerConnectionError   (connect)
        SetupError
            ChannelOpenError    (channel)
            QueueDeclareError   (declare)
        SerializationError      (serialize)
        PublishError            (publish)
        ClientClosedError       (closed)

Construction errors propagate to the caller. Serialization, publish and
closed-client errors are raised by LogClient.send() only; the severity
methods record them to the diagnostic logger instead.
"""


class RabbitLoggerError(Exception):
    """Base class for all rabbit_logger failures."""

    stage = "unknown"

    def __init__(self, message: str):
        super().__init__(f"[{self.stage}] {message}")
        self.reason = message


class BrokerConnectionError(RabbitLoggerError):
    """Broker unreachable, authentication rejected or protocol mismatch."""

    stage = "connect"


class SetupError(RabbitLoggerError):
    """Connection is up but the channel or queue could not be prepared."""

    stage = "setup"


class ChannelOpenError(SetupError):
    stage = "channel"


class QueueDeclareError(SetupError):
    stage = "declare"


class SerializationError(RabbitLoggerError):
    """Record could not be turned into a JSON document."""

    stage = "serialize"


class PublishError(RabbitLoggerError):
    """Transport failure while sending a message."""

    stage = "publish"


class ClientClosedError(RabbitLoggerError):
    """Publish attempted after close()."""

    stage = "closed"
