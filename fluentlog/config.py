"""
Configuration for the fluentd formatter.

FormatterConfig is the immutable per-formatter option set. Settings reads
process-wide defaults from the environment using pydantic-settings.
"""

import logging
from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from fluentlog.timestamps import RFC3339

logger = logging.getLogger(__name__)


class FormatterConfig(BaseModel):
    """Options fixed at formatter construction."""

    model_config = ConfigDict(frozen=True)

    timestamp_format: str = ""

    @property
    def effective_timestamp_format(self) -> str:
        """The layout actually used; empty means RFC 3339."""
        return self.timestamp_format or RFC3339


class Settings(BaseSettings):
    """Formatter defaults loaded from FLUENTLOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLUENTLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timestamp_format: str = ""
    log_level: str = "INFO"

    def formatter_config(self) -> FormatterConfig:
        """Build the formatter options from these settings."""
        return FormatterConfig(timestamp_format=self.timestamp_format)

    @property
    def parsed_log_level(self) -> int:
        """Resolve log_level to a stdlib level number, falling back to INFO."""
        level = logging.getLevelName(self.log_level.strip().upper())
        if isinstance(level, int):
            return level
        logger.warning(
            "Unknown log level, using INFO",
            extra={"log_level": self.log_level},
        )
        return logging.INFO


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
