# src/hypebot/core/errors.py

"""
Error taxonomy shared by the task model, the store and the command layer.

Every error carries an ErrorKind so the executor can turn it into a Response
without inspecting exception types one by one.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    FORMAT = "format"
    VALIDATION = "validation"
    INDEX = "index"
    PERSISTENCE = "persistence"
    UNRECOGNIZED = "unrecognized"


class HypeBotError(Exception):
    """Base class for all recoverable errors raised inside the core."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskFormatError(HypeBotError):
    """A date/time string does not match the required pattern."""

    kind = ErrorKind.FORMAT

    def __init__(self, message: str, *, value: str = "", pattern: str = "") -> None:
        super().__init__(message)
        self.value = value
        self.pattern = pattern


class TaskValidationError(HypeBotError):
    kind = ErrorKind.VALIDATION


class TaskIndexError(HypeBotError, IndexError):
    kind = ErrorKind.INDEX

    def __init__(self, message: str, *, index: int, size: int) -> None:
        super().__init__(message)
        self.index = index
        self.size = size


class TaskStoreError(HypeBotError):
    kind = ErrorKind.PERSISTENCE


class TaskStoreMissingError(TaskStoreError):
    """The persisted task file does not exist (yet)."""
