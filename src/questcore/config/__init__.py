# src/questcore/config/__init__.py
"""
Configuration package for QuestCore.

Settings come from Pydantic model defaults, an optional TOML file, a
dictionary, ``QUESTCORE__``-prefixed environment variables, and runtime
overrides, merged in that order by :func:`load_config`.

Environment variables:
    - Prefix: QUESTCORE__
    - Nested keys use double underscores: QUESTCORE__STORAGE__PATH
"""

from .loader import load_config
from .models import LoggingConfig, QuestCoreConfig, StorageConfig

__all__ = [
    "LoggingConfig",
    "QuestCoreConfig",
    "StorageConfig",
    "load_config",
]
