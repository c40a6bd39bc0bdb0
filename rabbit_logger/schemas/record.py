"""
Log Record Schema
=================

Bounded Context: Caller-Supplied Log Data

This module defines the severity levels and the structured record an
application hands to the log client.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Omission: unset optional fields never reach the wire (no nulls, no "")
- Closed set of levels: LogLevel values are the literal wire strings

Types:
- LogLevel: Severity enum (INFO, Error, Warning, DEBUG)
- LogRecord: Message plus optional action/request/transaction context
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LogLevel(str, Enum):
    """
    Severity levels understood by the ingestion side.

    The values are the exact strings stored in ``logLevel``; their mixed
    casing is part of the wire format.
    """

    INFO = "INFO"
    ERROR = "Error"
    WARNING = "Warning"
    DEBUG = "DEBUG"


# Python attribute -> wire key, in wire order
RECORD_FIELDS = (
    ("action_name", "actionName"),
    ("action_stage", "actionStage"),
    ("request_id", "requestId"),
    ("message", "message"),
    ("transaction_id", "transactionId"),
    ("context", "context"),
    ("response", "response"),
    ("backtrace", "backtrace"),
)


@dataclass(frozen=True)
class LogRecord:
    """
    Structured log record supplied by the caller.

    Only ``message`` is required. Optional fields left as None or "" are
    omitted from the published document. ``extra`` holds additional
    top-level keys; named fields take precedence over ``extra`` on the
    same key.

    Attributes:
        message: Human-readable log message (always emitted)
        action_name: Business action being performed
        action_stage: Stage of that action (e.g. "start", "success")
        request_id: Inbound request identifier
        transaction_id: Business transaction identifier
        context: Free-text context
        response: Response payload, already rendered as text
        backtrace: Stack trace text
        extra: Additional top-level keys for the published document

    Example:
        >>> record = LogRecord(
        ...     message="Test message",
        ...     action_name="TestAction",
        ...     action_stage="success",
        ...     transaction_id="12345",
        ... )
        >>> record.to_dict()
        {'actionName': 'TestAction', 'actionStage': 'success', 'message': 'Test message', 'transactionId': '12345'}
    """

    message: str
    action_name: Optional[str] = None
    action_stage: Optional[str] = None
    request_id: Optional[str] = None
    transaction_id: Optional[str] = None
    context: Optional[str] = None
    response: Optional[str] = None
    backtrace: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate invariants."""
        if not isinstance(self.message, str):
            raise TypeError(
                f"LogRecord message must be str, got {type(self.message).__name__}"
            )
        if not isinstance(self.extra, Mapping):
            raise TypeError(
                f"LogRecord extra must be a mapping, got {type(self.extra).__name__}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, dropping unset fields."""
        data: Dict[str, Any] = dict(self.extra)
        for attr, key in RECORD_FIELDS:
            value = getattr(self, attr)
            if key == "message":
                data[key] = value
            elif value:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogRecord":
        """
        Deserialize from a mapping.

        Accepts both wire keys (``actionName``) and attribute names
        (``action_name``). Unknown keys are kept in ``extra``.

        Raises:
            ValueError: If ``message`` is missing
        """
        known = {}
        extra = dict(data.get("extra") or {})
        for key, value in data.items():
            if key == "extra":
                continue
            for attr, wire_key in RECORD_FIELDS:
                if key in (attr, wire_key):
                    known[attr] = value
                    break
            else:
                extra[key] = value

        if "message" not in known:
            raise ValueError("Missing required LogRecord field: 'message'")

        return cls(extra=extra, **known)
