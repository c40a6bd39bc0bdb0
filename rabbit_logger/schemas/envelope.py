"""
Envelope Schema
===============

Bounded Context: Contextual Log Fields

The envelope is the fixed set of fields stamped on every published log:
calendar date, date-time, Unix timestamp, environment, project name and
severity. It is rebuilt for every call and always fully populated.
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, Optional

from .record import LogLevel

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Envelope:
    """
    Immutable snapshot of the contextual fields for one log call.

    Attributes:
        date: Calendar date, ``YYYY-MM-DD``
        date_time: Combined date and time, ``YYYY-MM-DD HH:MM:SS``
        timestamp: Unix epoch seconds
        environment: Deployment environment label
        project_name: Project label
        log_level: Severity of the call
    """

    date: str
    date_time: str
    timestamp: int
    environment: str
    project_name: str
    log_level: LogLevel

    @classmethod
    def build(
        cls,
        log_level: LogLevel,
        tz: tzinfo,
        environment: str,
        project_name: str,
        now: Optional[datetime] = None
    ) -> "Envelope":
        """
        Build the envelope for the current wall-clock time in ``tz``.

        Args:
            log_level: Severity of the call
            tz: Timezone the date strings are rendered in
            environment: Deployment environment label
            project_name: Project label
            now: Aware datetime to use instead of the current time

        Example:
            >>> from datetime import timezone
            >>> env = Envelope.build(
            ...     LogLevel.INFO, timezone.utc, "development", "ExampleProject",
            ...     now=datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc),
            ... )
            >>> env.date_time
            '2024-05-01 12:30:00'
        """
        moment = (now or datetime.now(tz)).astimezone(tz)
        return cls(
            date=moment.strftime(DATE_FORMAT),
            date_time=moment.strftime(DATETIME_FORMAT),
            timestamp=int(moment.timestamp()),
            environment=environment,
            project_name=project_name,
            log_level=LogLevel(log_level),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire keys of the published document."""
        return {
            "date": self.date,
            "dateTime": self.date_time,
            "timestamp": self.timestamp,
            "environment": self.environment,
            "projectName": self.project_name,
            "logLevel": self.log_level.value,
        }
