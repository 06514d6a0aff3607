"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log
directories and to build throwaway SQLite task stores.
"""

from __future__ import annotations

import logging
import logging.handlers
import sqlite3
from collections.abc import Iterable, Sequence
from pathlib import Path
from unittest.mock import patch

import pytest

import taskseed.config as config_module
import taskseed.utils.logger as logger_module
from taskseed.adapters.sql.schema import CREATE_TASKS_TABLE
from taskseed.config import DatabaseConfig


# ---------------------------------------------------------------------------
# Config / log isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* and reset module-level singletons."""
    config_module._config_manager = None
    logger_module._logger = None
    with patch("taskseed.config.user_config_dir", return_value=str(tmp_path / "config")):
        with patch("taskseed.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
            yield tmp_path
    config_module._config_manager = None
    logger_module._logger = None
    app_logger = logging.getLogger("taskseed")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            app_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def no_retry_sleep():
    """Skip backoff delays between connection attempts."""
    with patch("taskseed.adapters.sql.connection.time.sleep") as sleep:
        yield sleep


# ---------------------------------------------------------------------------
# SQLite task stores
# ---------------------------------------------------------------------------


def make_tasks_db(
    path: Path,
    rows: Iterable[Sequence],
    *,
    ddl: str = CREATE_TASKS_TABLE,
    columns: Sequence[str] = (
        "id",
        "title",
        "description",
        "due_date",
        "status",
        "assigned_to",
        "priority",
    ),
) -> Path:
    """Create a SQLite file with a tasks table holding *rows*."""
    conn = sqlite3.connect(str(path))
    try:
        conn.execute(ddl)
        placeholders = ", ".join("?" for _ in columns)
        conn.executemany(
            f"INSERT INTO tasks ({', '.join(columns)}) VALUES ({placeholders})",
            list(rows),
        )
        conn.commit()
    finally:
        conn.close()
    return path


SAMPLE_ROWS = [
    (1, "Write report", "Writing a report", "2024-03-01", "Pending", 1, 0),
    (2, "Morning run", "Running", "2024-03-02", "Completed", 2, 1),
    (3, "Groceries", "Shopping for groceries", "2024-03-03", "Pending", None, None),
]


@pytest.fixture()
def tasks_db(tmp_path) -> Path:
    """SQLite store with the three sample rows."""
    return make_tasks_db(tmp_path / "tasks.db", SAMPLE_ROWS)


@pytest.fixture()
def sqlite_config(tasks_db) -> DatabaseConfig:
    return DatabaseConfig(driver="sqlite", path=str(tasks_db), connect_retries=0)


@pytest.fixture()
def make_db():
    """Factory building SQLite task stores with custom rows or layout."""
    return make_tasks_db


@pytest.fixture()
def sample_rows() -> list[tuple]:
    return list(SAMPLE_ROWS)
