"""
Rabbit Logger Schemas
=====================

Bounded Context: Data Structures

This module defines immutable, typed data structures for published logs.

Design:
- Frozen dataclasses (immutability)
- to_dict() for JSON serialization
- from_dict() for deserialization of caller records

Public API
----------
    LogLevel: Severity enum (INFO, Error, Warning, DEBUG)
    LogRecord: Caller-supplied structured record
    Envelope: Contextual fields stamped on every log

Example:
    >>> from rabbit_logger.schemas import LogRecord
    >>> record = LogRecord(message="Order created", action_name="CreateOrder")
"""

from .record import LogLevel, LogRecord
from .envelope import Envelope

__all__ = [
    'LogLevel',
    'LogRecord',
    'Envelope',
]
