# src/questcore/logging_config.py
"""
Logging configuration for QuestCore.

Key concepts:

    **Display filter**: When ``console_enabled=False`` (the default), the
    console handler still exists but only passes through log records that
    carry ``extra={"display": True}``. Save/load announcements reach the
    user this way while per-event chatter stays in the log file.

    **File modes**: ``file_mode="per_run"`` (default) creates a new
    timestamped file each invocation; ``file_mode="single"`` appends to one
    file rotated by ``RotatingFileHandler``.

Usage:
    from questcore.logging_config import configure_logging, log_display

    configure_logging(app_name="questcore")

    import logging
    logger = logging.getLogger("questcore.app")
    log_display(logger, logging.INFO, "Loaded %d goals", count)
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "console_enabled": False,
    "console_level": "WARNING",
    "console_format": "%(levelname)s - %(message)s",
    "file_enabled": False,
    "file_level": "DEBUG",
    "file_directory": "~/.local/share/questcore/logs",
    "file_mode": "per_run",
    "file_name_pattern": "{app}_{timestamp:%Y%m%d_%H%M%S}.log",
    "file_single_name": "{app}.log",
    "file_format": "%(asctime)s [%(levelname)-8s] %(name)-30s - %(message)s (%(filename)s:%(lineno)d)",
    "rotation_max_bytes": 10 * 1024 * 1024,  # 10 MB
    "rotation_backup_count": 5,
    "display_min_level": "INFO",
    "components": {
        "questcore": "INFO",
    },
}


def _resolve_level(value: str | int, default: int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else default


# ---------------------------------------------------------------------------
# DisplayFilter
# ---------------------------------------------------------------------------


class DisplayFilter(logging.Filter):
    """Controls which log records pass through to the console handler.

    When console is globally enabled (verbose), everything passes and the
    handler's own level does the filtering. Otherwise only records with
    ``record.display = True`` at or above ``display_min_level`` pass.
    """

    def __init__(
        self,
        console_globally_enabled: bool = False,
        display_min_level: int = logging.INFO,
    ) -> None:
        super().__init__()
        self.console_globally_enabled = console_globally_enabled
        self.display_min_level = display_min_level

    def filter(self, record: logging.LogRecord) -> bool:
        if self.console_globally_enabled:
            return True

        if getattr(record, "display", False):
            return record.levelno >= self.display_min_level

        return False


# ---------------------------------------------------------------------------
# UnifiedLoggingManager
# ---------------------------------------------------------------------------


class UnifiedLoggingManager:
    """
    Singleton manager for logging configuration.

    Ensures logging is only configured once.
    """

    _instance: Optional["UnifiedLoggingManager"] = None
    _configured: bool = False
    _log_file_path: Path | None = None

    def __new__(cls) -> "UnifiedLoggingManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "UnifiedLoggingManager":
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    def configure(
        self,
        app_name: str = "questcore",
        config: dict[str, Any] | None = None,
        force_reconfigure: bool = False,
    ) -> Path | None:
        """
        Configure logging for the application.

        Args:
            app_name: Name of the application (used in the log filename).
            config: Logging settings; missing keys take DEFAULT_LOGGING_CONFIG values.
            force_reconfigure: If True, reconfigure even if already configured.

        Returns:
            Path to the log file, or None if file logging is disabled.
        """
        if self._configured and not force_reconfigure:
            return self._log_file_path

        log_config = {**DEFAULT_LOGGING_CONFIG, **(config or {})}

        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(logging.DEBUG)

        # --- Console handler (always created, gated by DisplayFilter) ---
        console_globally_enabled = bool(log_config.get("console_enabled", False))
        display_filter = DisplayFilter(
            console_globally_enabled=console_globally_enabled,
            display_min_level=_resolve_level(log_config.get("display_min_level", "INFO"), logging.INFO),
        )
        console_handler = self._create_console_handler(log_config)
        if not console_globally_enabled:
            # The filter is the sole gate: display=True passes, the rest is blocked.
            console_handler.setLevel(logging.DEBUG)
        console_handler.addFilter(display_filter)
        root_logger.addHandler(console_handler)

        # --- File handler ---
        log_file_path: Path | None = None
        if log_config.get("file_enabled", False):
            file_handler, log_file_path = self._create_file_handler(log_config, app_name)
            if file_handler:
                root_logger.addHandler(file_handler)

        components = log_config.get("components", DEFAULT_LOGGING_CONFIG["components"])
        for component_name, level_str in components.items():
            logging.getLogger(component_name).setLevel(_resolve_level(level_str, logging.INFO))

        UnifiedLoggingManager._configured = True
        UnifiedLoggingManager._log_file_path = log_file_path

        if log_file_path:
            logging.getLogger(__name__).debug("Logging configured. Log file: %s", log_file_path)

        return log_file_path

    def _create_console_handler(self, config: dict[str, Any]) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_resolve_level(config.get("console_level", "WARNING"), logging.WARNING))
        fmt = config.get("console_format", DEFAULT_LOGGING_CONFIG["console_format"])
        handler.setFormatter(logging.Formatter(fmt))
        return handler

    def _create_file_handler(
        self, config: dict[str, Any], app_name: str
    ) -> tuple[logging.Handler | None, Path | None]:
        """Create the file handler for ``per_run`` or ``single`` mode."""
        dir_str = config.get("file_directory", DEFAULT_LOGGING_CONFIG["file_directory"])
        log_dir = Path(os.path.expanduser(dir_str))

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            sys.stderr.write(f"Warning: Cannot create log directory {log_dir}: {e}\n")
            return None, None

        handler: logging.Handler
        if config.get("file_mode", "per_run") == "single":
            name_pattern = config.get("file_single_name", "{app}.log")
            try:
                filename = name_pattern.format(app=app_name)
            except (KeyError, ValueError):
                filename = f"{app_name}.log"

            log_file_path = log_dir / filename
            try:
                handler = RotatingFileHandler(
                    log_file_path,
                    maxBytes=config.get("rotation_max_bytes", 10 * 1024 * 1024),
                    backupCount=config.get("rotation_backup_count", 5),
                    encoding="utf-8",
                )
            except OSError as e:
                sys.stderr.write(f"Warning: Cannot create log file {log_file_path}: {e}\n")
                return None, None
        else:
            pattern = config.get("file_name_pattern", DEFAULT_LOGGING_CONFIG["file_name_pattern"])
            timestamp = datetime.now()
            try:
                filename = pattern.format(app=app_name, timestamp=timestamp)
            except (KeyError, ValueError):
                filename = f"{app_name}_{timestamp.strftime('%Y%m%d_%H%M%S')}.log"

            log_file_path = log_dir / filename
            try:
                handler = logging.FileHandler(log_file_path, encoding="utf-8")
            except OSError as e:
                sys.stderr.write(f"Warning: Cannot create log file {log_file_path}: {e}\n")
                return None, None

        handler.setLevel(_resolve_level(config.get("file_level", "DEBUG"), logging.DEBUG))
        fmt = config.get("file_format", DEFAULT_LOGGING_CONFIG["file_format"])
        handler.setFormatter(logging.Formatter(fmt))

        return handler, log_file_path


# ---------------------------------------------------------------------------
# Public module-level functions
# ---------------------------------------------------------------------------


def configure_logging(
    app_name: str = "questcore",
    config: dict[str, Any] | None = None,
    force_reconfigure: bool = False,
) -> Path | None:
    """
    Configure logging for the application.

    Call this early in application startup. ``config`` is usually
    ``QuestCoreConfig.logging.model_dump()``.

    Example:
        from questcore.config import load_config
        from questcore.logging_config import configure_logging

        settings = load_config()
        configure_logging(config=settings.logging.model_dump())
    """
    return UnifiedLoggingManager.get_instance().configure(
        app_name=app_name,
        config=config,
        force_reconfigure=force_reconfigure,
    )


def log_display(
    logger: logging.Logger,
    level: int,
    msg: str,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Log a message that also appears on console even in silent mode.

    Sets ``extra={"display": True}`` (merged with any caller-supplied
    ``extra``) so the record passes the :class:`DisplayFilter`.
    """
    extra = kwargs.pop("extra", None) or {}
    extra["display"] = True
    kwargs["extra"] = extra
    logger.log(level, msg, *args, **kwargs)

