"""
Fluentd JSON formatter.

Like a plain JSON log formatter, but with the field names and severity
values the Kubernetes fluentd agent recognizes: ``time``, ``message`` and
``severity``.
"""

import json
import logging
from typing import Any, Optional

from fluentlog.config import FormatterConfig
from fluentlog.entry import FIELD_PREFIX, LogEntry
from fluentlog.normalize import value
from fluentlog.timestamps import format_timestamp

TIME_KEY = "time"
MESSAGE_KEY = "message"
SEVERITY_KEY = "severity"

# Keys a caller's own fields may use that would clash with log output.
CLASH_KEYS = ("time", "msg", "level")
CLASH_PREFIX = FIELD_PREFIX


class FormatError(Exception):
    """Raised when an entry cannot be serialized to JSON."""


def prefix_field_clashes(data: dict[str, Any]) -> None:
    """
    Copy clashing field values to ``fields.<key>``.

    The original key stays in place; canonical keys written afterwards
    overwrite it, so the copy keeps the caller's value.

    Args:
        data: Normalized output fields, modified in place.
    """
    for key in CLASH_KEYS:
        if key in data:
            data[CLASH_PREFIX + key] = data[key]


class FluentdFormatter(logging.Formatter):
    """Formats log entries as single-line fluentd JSON."""

    def __init__(
        self,
        timestamp_format: Optional[str] = None,
        config: Optional[FormatterConfig] = None,
    ):
        super().__init__()
        if config is None:
            config = FormatterConfig(timestamp_format=timestamp_format or "")
        self._config = config

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format_entry(self, entry: LogEntry) -> bytes:
        """
        Serialize one entry as a newline-terminated JSON line.

        Args:
            entry: The log entry to format.

        Returns:
            UTF-8 encoded JSON object followed by a single newline.

        Raises:
            FormatError: If a field value cannot be encoded as JSON.
        """
        data: dict[str, Any] = {}
        for key, item in entry.data.items():
            data[key] = value(item)
        prefix_field_clashes(data)

        data[TIME_KEY] = format_timestamp(
            entry.time, self._config.effective_timestamp_format
        )
        data[MESSAGE_KEY] = entry.message
        data[SEVERITY_KEY] = str(entry.level)

        try:
            serialized = json.dumps(
                data,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise FormatError(f"Failed to marshal fields to JSON, {e}") from e

        return serialized.encode("utf-8") + b"\n"

    def format(self, record: logging.LogRecord) -> str:
        """Format a stdlib LogRecord; the handler adds the line terminator."""
        line = self.format_entry(LogEntry.from_record(record, self))
        return line.decode("utf-8").rstrip("\n")
