"""
Structured fluentd logging setup.

Wires FluentdFormatter into the stdlib root logger.
"""

import logging
from typing import IO, Optional

from fluentlog.config import FormatterConfig, get_settings
from fluentlog.formatter import FluentdFormatter

logger = logging.getLogger(__name__)


def setup_fluentd_logging(
    level: Optional[int] = None,
    timestamp_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Configure the root logger with fluentd JSON formatting.

    Args:
        level: Root log level (defaults to FLUENTLOG_LOG_LEVEL).
        timestamp_format: Timestamp layout (defaults to FLUENTLOG_TIMESTAMP_FORMAT).
        stream: Output stream (defaults to stderr).

    Returns:
        The installed handler.
    """
    settings = get_settings()
    if level is None:
        level = settings.parsed_log_level
    if timestamp_format is None:
        config = settings.formatter_config()
    else:
        config = FormatterConfig(timestamp_format=timestamp_format)

    root = logging.getLogger()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(FluentdFormatter(config=config))
    root.handlers = [handler]
    root.setLevel(level)

    logger.debug(
        "Fluentd logging configured",
        extra={"timestamp_format": config.effective_timestamp_format},
    )
    return handler
