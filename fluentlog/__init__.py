"""JSON log formatting for the Kubernetes fluentd agent."""

from fluentlog.config import FormatterConfig, Settings, get_settings
from fluentlog.entry import LogEntry
from fluentlog.formatter import FluentdFormatter, FormatError, prefix_field_clashes
from fluentlog.json_logging import setup_fluentd_logging
from fluentlog.levels import Level, parse_level
from fluentlog.normalize import value
from fluentlog.timestamps import RFC3339, RFC3339_NANO, format_timestamp, parse_timestamp

__all__ = [
    "FluentdFormatter",
    "FormatError",
    "FormatterConfig",
    "Level",
    "LogEntry",
    "RFC3339",
    "RFC3339_NANO",
    "Settings",
    "format_timestamp",
    "get_settings",
    "parse_level",
    "parse_timestamp",
    "prefix_field_clashes",
    "setup_fluentd_logging",
    "value",
]
