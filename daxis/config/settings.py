"""Application settings loaded from the environment."""

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DaxisSettings(BaseSettings):
    """Settings for the daxis command line with environment variable support.

    Precedence order (highest to lowest):
    1. Constructor arguments
    2. Environment variables (``DAXIS_*``)
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="DAXIS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level when no -v/--debug flag is given",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional JSON log file",
    )
    json_logs: bool = Field(
        default=False,
        description="Render console logs as JSON",
    )
    inherit_environment: bool = Field(
        default=True,
        description=(
            "Start build environments from the process environment before "
            "applying -e KEY=VALUE overrides"
        ),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_file", mode="before")
    @classmethod
    def validate_log_file(cls, v: Any) -> Path | None:
        """Expand user home in the log file path."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        return getattr(logging, self.log_level, logging.WARNING)  # type: ignore[no-any-return]


def load_settings(**overrides: Any) -> DaxisSettings:
    """Create settings, ignoring overrides that are None."""
    return DaxisSettings(**{k: v for k, v in overrides.items() if v is not None})
