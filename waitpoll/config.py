"""Configuration loading for waitpoll.

This module provides centralized configuration management:
- Load default poll timing from environment variables and .env files
- Validate configuration using pydantic
- Configure application logging
"""

import logging
import sys
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from waitpoll.core.models import PollOptions


class Settings(BaseSettings):
    """Poll defaults and logging configuration loaded from environment.

    Variables are prefixed with WAITPOLL_, e.g. WAITPOLL_DEFAULT_INTERVAL_MS.
    """

    model_config = SettingsConfigDict(
        env_prefix="WAITPOLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Poll defaults
    default_interval_ms: int = Field(
        default=1000,
        description="Minimum spacing between condition checks in milliseconds",
    )
    default_timeout_ms: int = Field(
        default=-1,
        description="Deadline in milliseconds (-1 = none, 0 = fail on first negative check)",
    )
    fail_fast: bool = Field(
        default=False,
        description="Propagate evaluator errors instead of treating them as not met",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("default_interval_ms")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Ensure interval is non-negative."""
        if v < 0:
            raise ValueError("default_interval_ms must be non-negative")
        return v

    @field_validator("default_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Ensure timeout is -1, 0 or positive."""
        if v < -1:
            raise ValueError("default_timeout_ms must be -1, 0 or positive")
        return v

    def to_poll_options(self) -> PollOptions:
        return PollOptions(
            interval_ms=self.default_interval_ms,
            timeout_ms=self.default_timeout_ms,
            fail_fast=self.fail_fast,
        )


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


__all__ = ["Settings", "configure_logging", "load_settings"]
