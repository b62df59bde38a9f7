# src/questcore/config/models.py
"""
Configuration models for QuestCore.

The configuration hierarchy:
    QuestCoreConfig (root)
    ├── StorageConfig   - Where the goal file lives and how it is encoded
    └── LoggingConfig   - Console / file logging settings

Usage:
    >>> from questcore.config.models import QuestCoreConfig
    >>> config = QuestCoreConfig()  # All defaults
    >>> config.storage.encoding
    'utf-8'
"""

from __future__ import annotations

import codecs
import os
from typing import Dict, Literal

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# STORAGE CONFIGURATION
# =============================================================================


class StorageConfig(BaseModel):
    """
    Configuration for the goal file.

    Examples:
        >>> StorageConfig().path.endswith("goals.txt")
        True
    """

    path: str = Field(
        default="~/.local/share/questcore/goals.txt",
        validate_default=True,
        description=(
            "Path to the goal file. "
            "Tilde and environment variable expansion is applied."
        ),
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the goal file",
    )

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand ~ and environment variables in path."""
        return os.path.expanduser(os.path.expandvars(v))

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}") from None
        return v


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


class LoggingConfig(BaseModel):
    """
    Logging settings, passed to ``configure_logging`` via ``model_dump()``.
    """

    console_enabled: bool = Field(
        default=False,
        description="Show all records on the console (otherwise only display=True records)",
    )
    console_level: str = Field(default="WARNING", description="Console log level")
    display_min_level: str = Field(
        default="INFO", description="Minimum level for display=True records"
    )
    file_enabled: bool = Field(default=False, description="Write a log file")
    file_level: str = Field(default="DEBUG", description="File log level")
    file_directory: str = Field(
        default="~/.local/share/questcore/logs", description="Directory for log files"
    )
    file_mode: Literal["per_run", "single"] = Field(
        default="per_run",
        description="New timestamped file per run, or one rotating file",
    )
    components: Dict[str, str] = Field(
        default_factory=lambda: {"questcore": "INFO"},
        description="Per-logger level overrides",
    )

    @field_validator("console_level", "display_min_level", "file_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Validate log level values."""
        level_upper = v.upper()
        if level_upper not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {list(_LOG_LEVELS)}")
        return level_upper


# =============================================================================
# ROOT CONFIG
# =============================================================================


class QuestCoreConfig(BaseModel):
    """
    Root configuration model.

    Usage:
        >>> config = QuestCoreConfig(storage=StorageConfig(path="/tmp/goals.txt"))
        >>> config.storage.path
        '/tmp/goals.txt'
    """

    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Goal file settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging settings"
    )
