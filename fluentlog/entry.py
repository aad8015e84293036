"""
Log entry value type.

A LogEntry is what the formatter consumes: a timestamp, a level, a message
and the caller's context fields. Entries can be built directly or from a
stdlib logging.LogRecord.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional

from fluentlog.levels import Level

# Attributes every LogRecord carries; anything else came in through extra=.
RESERVED_RECORD_ATTRS = frozenset((
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
))

ERROR_KEY = "error"
STACK_KEY = "stack"

# Prefix for caller fields moved aside by a key the output reserves.
FIELD_PREFIX = "fields."

_DEFAULT_FORMATTER = logging.Formatter()


@dataclass(frozen=True)
class LogEntry:
    """One structured log event."""

    time: datetime
    level: Level
    message: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def from_record(
        cls,
        record: logging.LogRecord,
        formatter: Optional[logging.Formatter] = None,
    ) -> "LogEntry":
        """
        Build an entry from a stdlib LogRecord.

        Fields passed via ``extra=`` become entry data. A record carrying
        exc_info gets the formatted traceback under ``error``, and one
        carrying stack_info gets the stack under ``stack``. A caller field
        already using either key is kept as ``fields.<key>``.

        Args:
            record: The record handed to a logging.Formatter.
            formatter: Formatter whose formatException/formatStack render
                tracebacks (defaults to a plain logging.Formatter).

        Returns:
            A new LogEntry.
        """
        formatter = formatter or _DEFAULT_FORMATTER
        data = {
            key: value
            for key, value in record.__dict__.items()
            if key not in RESERVED_RECORD_ATTRS
        }

        if record.exc_info and record.exc_info[1]:
            _set_reserved(data, ERROR_KEY, formatter.formatException(record.exc_info))
        if record.stack_info:
            _set_reserved(data, STACK_KEY, formatter.formatStack(record.stack_info))

        return cls(
            time=datetime.fromtimestamp(record.created, tz=timezone.utc),
            level=Level.from_logging(record.levelno),
            message=record.getMessage(),
            data=data,
        )


def _set_reserved(data: dict[str, Any], key: str, text: str) -> None:
    if key in data:
        data[FIELD_PREFIX + key] = data[key]
    data[key] = text
