"""Decorators for command functions."""

import functools
import time
from collections.abc import Callable

import typer

from taskseed.errors import TaskSeedError
from taskseed.utils.exit_codes import ERROR_GENERAL, exit_code_for
from taskseed.utils.logger import get_logger
from taskseed.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and error-to-exit-code translation."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except typer.Exit:
            raise

        except (TaskSeedError, ValueError) as e:
            elapsed = time.monotonic() - start
            code = exit_code_for(e)
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, e)
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.exception("command failed: %s (%.3fs) - %s", cmd, elapsed, e)
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
