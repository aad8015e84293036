"""
Severity levels.

Ordered from most to least severe, with the lowercase names the fluentd
agent expects in the ``severity`` field.
"""

import logging
from enum import IntEnum


class Level(IntEnum):
    """Log severity. Lower values are more severe."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def name_text(self) -> str:
        """Canonical severity name, e.g. ``"warning"``."""
        return str(self)

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """
        Map a stdlib logging level number to a Level.

        Args:
            levelno: Numeric level from a LogRecord.

        Returns:
            The closest Level; anything above ERROR is FATAL.
        """
        if levelno < logging.DEBUG:
            return cls.TRACE
        if levelno <= logging.DEBUG:
            return cls.DEBUG
        if levelno <= logging.INFO:
            return cls.INFO
        if levelno <= logging.WARNING:
            return cls.WARNING
        if levelno <= logging.ERROR:
            return cls.ERROR
        return cls.FATAL


_ALIASES = {"warn": Level.WARNING}


def parse_level(text: str) -> Level:
    """
    Parse a severity name.

    Args:
        text: Level name, case-insensitive. ``warn`` is accepted for warning.

    Returns:
        Matching Level.

    Raises:
        ValueError: If the name is not a known level.
    """
    key = text.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    for level in Level:
        if str(level) == key:
            return level
    raise ValueError(f"not a valid log level: {text!r}")
