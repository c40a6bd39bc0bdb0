"""
RabbitMQ Publishers
===================

Bounded Context: Message Production

Public API
----------
    BasePublisher: Abstract publisher (connection lifecycle, publish, close)
    LogClient: Structured application log publisher
"""

from .base import BasePublisher
from .log_client import LogClient

__all__ = [
    'BasePublisher',
    'LogClient',
]
