"""Custom exceptions for TaskSeed."""

from __future__ import annotations


class TaskSeedError(Exception):
    """Base exception for all TaskSeed errors."""


class ConfigurationError(TaskSeedError):
    """Raised when connection parameters or the config file are missing or invalid."""


class StoreConnectionError(TaskSeedError):
    """Raised when the task store is unreachable or rejects the credentials."""


class QueryError(TaskSeedError):
    """Raised when the task query is malformed or the table does not exist."""


class MappingError(TaskSeedError):
    """Raised when a result row does not match the tasks column contract."""

    def __init__(
        self,
        message: str,
        *,
        row_index: int | None = None,
        column: str | None = None,
    ):
        super().__init__(message)
        self.row_index = row_index
        self.column = column
