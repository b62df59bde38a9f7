# src/questcore/goals/store.py
"""
Persistence backends for serialized tracker state.

A backend only moves text; encoding and decoding stay in the codec so that
any backend round-trips exactly the same data.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..exceptions import StorageError

logger = logging.getLogger(__name__)


@runtime_checkable
class GoalStorageProtocol(Protocol):
    """Protocol for goal storage backends."""

    def exists(self) -> bool: ...
    def read_text(self) -> str: ...
    def write_text(self, text: str) -> None: ...


class GoalFileStore:
    """
    Plain-text file persistence for a goal tracker.

    Writes go to a sibling temp file that is then renamed over the target,
    so a crash mid-write never leaves a truncated goal file behind.

    Args:
        path: Path to the goal file. ``~`` and environment variables are expanded.
        encoding: Text encoding of the file.

    Example:
        >>> store = GoalFileStore("~/.local/share/questcore/goals.txt")
        >>> tracker = GoalTracker(storage=store)
        >>> tracker.load()
        False
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = "~/.local/share/questcore/goals.txt",
        encoding: str = "utf-8",
    ) -> None:
        self._path = Path(os.path.expanduser(os.path.expandvars(os.fspath(path))))
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_text(self) -> str:
        """Read the whole goal file."""
        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read goals from {self._path}: {exc}") from exc
        logger.debug("Read %d bytes from %s", len(text), self._path)
        return text

    def write_text(self, text: str) -> None:
        """Atomically replace the goal file with ``text``."""
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps "\n" terminators on every platform
            with open(tmp_path, "w", encoding=self._encoding, newline="") as fh:
                fh.write(text)
            tmp_path.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Failed to write goals to {self._path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(text), self._path)

    def __repr__(self) -> str:
        return f"GoalFileStore({str(self._path)!r})"
