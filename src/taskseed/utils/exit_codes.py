"""
Exit codes for TaskSeed.

Each reader failure kind gets its own code so scripts seeding fixtures can
tell a bad config apart from an unreachable or malformed store.
"""

from taskseed.errors import (
    ConfigurationError,
    MappingError,
    QueryError,
    StoreConnectionError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Missing or invalid configuration
ERROR_CONFIGURATION = 3

# Task store unreachable or authentication failure
ERROR_CONNECTION = 4

# Query failed (malformed query, missing table)
ERROR_QUERY = 5

# Result rows do not match the tasks column contract
ERROR_MAPPING = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIGURATION: "ERROR_CONFIGURATION",
        ERROR_CONNECTION: "ERROR_CONNECTION",
        ERROR_QUERY: "ERROR_QUERY",
        ERROR_MAPPING: "ERROR_MAPPING",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_CONFIGURATION: "Configuration error - check 'taskseed config view'",
        ERROR_CONNECTION: "Cannot connect to the task store",
        ERROR_QUERY: "Query against the tasks table failed",
        ERROR_MAPPING: "A tasks row does not match the expected columns",
    }
    return descriptions.get(code, "Unknown error")


_ERROR_EXIT_CODES = (
    (ConfigurationError, ERROR_CONFIGURATION),
    (StoreConnectionError, ERROR_CONNECTION),
    (QueryError, ERROR_QUERY),
    (MappingError, ERROR_MAPPING),
    (ValueError, ERROR_INVALID_ARGS),
)


def exit_code_for(error: BaseException) -> int:
    """Get the exit code matching an exception raised by a command."""
    for error_type, code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ERROR_GENERAL
