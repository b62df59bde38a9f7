# src/questcore/__init__.py
"""
QuestCore - goal tracking with per-variant reward rules and loss-free
text persistence.

Goals come in three variants (simple, eternal, checklist), each with its
own completion and reward behaviour. A GoalTracker keeps them in order
along with the running score, and can serialize the whole state to a
line-oriented text format and restore it again.
"""

from importlib.metadata import PackageNotFoundError, version

from .config import QuestCoreConfig, load_config
from .exceptions import (
    ConfigError,
    FormatError,
    IndexOutOfRangeError,
    QuestCoreError,
    StorageError,
    UnknownVariantError,
    ValidationError,
)
from .goals import (
    ChecklistGoal,
    EternalGoal,
    Goal,
    GoalFileStore,
    GoalKind,
    GoalTracker,
    SimpleGoal,
)
from .logging_config import configure_logging

try:
    __version__ = version("questcore")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ChecklistGoal",
    "ConfigError",
    "EternalGoal",
    "FormatError",
    "Goal",
    "GoalFileStore",
    "GoalKind",
    "GoalTracker",
    "IndexOutOfRangeError",
    "QuestCoreConfig",
    "QuestCoreError",
    "SimpleGoal",
    "StorageError",
    "UnknownVariantError",
    "ValidationError",
    "configure_logging",
    "load_config",
]
