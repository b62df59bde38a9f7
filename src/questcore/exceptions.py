# src/questcore/exceptions.py
"""
Custom exceptions for the QuestCore library.

This module defines a hierarchy of custom exception classes so callers can
tell a bad construction parameter apart from a bad goal reference or a
corrupt save file, and handle each one on its own terms.
"""

from typing import Optional


class QuestCoreError(Exception):
    """Base class for all QuestCore specific errors."""
    def __init__(self, message: str = "An unspecified error occurred in QuestCore."):
        super().__init__(message)

class ConfigError(QuestCoreError):
    """Raised for errors related to configuration loading or validation."""
    def __init__(self, message: str = "Configuration error."):
        super().__init__(message)

class ValidationError(QuestCoreError):
    """
    Raised when a goal is built with missing or invalid parameters.

    Nothing is mutated when this is raised; the caller can correct the
    parameters and try again.
    """
    def __init__(self, message: str = "Invalid goal parameters.", field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{message} Field: '{field}'"
        super().__init__(message)

class IndexOutOfRangeError(QuestCoreError):
    """Raised when a goal number does not refer to an existing goal."""
    def __init__(self, number: object = None, size: int = 0, message: str = "Goal number out of range."):
        self.number = number
        self.size = size
        super().__init__(f"{message} Number: {number!r}, goals available: {size}")

class FormatError(QuestCoreError):
    """Raised for a malformed score line or goal record in persisted text."""
    def __init__(self, message: str = "Malformed goal data.", line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)

class UnknownVariantError(FormatError):
    """Raised when a persisted goal record carries an unrecognized variant tag."""
    def __init__(self, tag: str = "", line_number: Optional[int] = None):
        self.tag = tag
        super().__init__(f"Unknown goal type '{tag}'.", line_number=line_number)

class StorageError(QuestCoreError):
    """Raised when the goal file cannot be read or written."""
    def __init__(self, message: str = "Storage error."):
        super().__init__(message)
