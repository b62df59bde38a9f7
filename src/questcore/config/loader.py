# src/questcore/config/loader.py
"""
Configuration loading.

Sources are merged in order, later ones winning:
    1. Default values (from the Pydantic models)
    2. TOML config file (if provided)
    3. Config dictionary (if provided)
    4. Environment variables (QUESTCORE__<SECTION>__<KEY>)
    5. Runtime overrides (if provided)
"""

import copy
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigError
from .models import QuestCoreConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

ENV_PREFIX = "QUESTCORE__"


def load_config(
    config_path: Optional[Path] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> QuestCoreConfig:
    """
    Load configuration from a TOML file, dictionary, and environment.

    Args:
        config_path: Optional path to a TOML config file.
        config_dict: Optional config dictionary.
        overrides: Optional runtime overrides.

    Returns:
        QuestCoreConfig instance.

    Raises:
        ConfigError: If the TOML file cannot be parsed or a value is invalid.

    Example:
        >>> config = load_config(config_dict={"storage": {"path": "/tmp/goals.txt"}})
        >>> config.storage.path
        '/tmp/goals.txt'
    """
    merged_config: Dict[str, Any] = {}

    if config_path is not None:
        try:
            with open(config_path, "rb") as f:
                merged_config = _deep_merge(merged_config, tomllib.load(f))
            logger.debug("Loaded config from %s", config_path)
        except FileNotFoundError:
            logger.warning("Config file not found: %s", config_path)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e

    if config_dict is not None:
        merged_config = _deep_merge(merged_config, config_dict)

    merged_config = _apply_env_overrides(merged_config)

    if overrides is not None:
        merged_config = _deep_merge(merged_config, overrides)

    try:
        return QuestCoreConfig(**merged_config)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid QuestCore configuration: {e}") from e


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply environment variable overrides.

    Examples:
        QUESTCORE__STORAGE__PATH=/srv/goals.txt
        QUESTCORE__LOGGING__CONSOLE_ENABLED=true
    """
    result = copy.deepcopy(config)
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        path_parts = key[len(ENV_PREFIX):].lower().split("__")
        if len(path_parts) < 2:
            continue

        current = result
        for part in path_parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[path_parts[-1]] = _convert_env_value(value)

    return result


def _convert_env_value(value: str) -> Any:
    """
    Convert an environment variable string to a bool if it reads true or false.

    Anything else stays a string; the config models coerce it.
    """
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    return value
