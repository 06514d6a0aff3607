"""Database connection management for the task store.

Each call to :meth:`DatabaseConnection.open` returns a new DB-API 2.0
connection owned by the caller. Nothing is cached or registered globally.
"""

from __future__ import annotations

import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from taskseed.config import DatabaseConfig
from taskseed.errors import StoreConnectionError

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Opens connections to the configured task store.

    Provides:
    - Driver dispatch (sqlite3 or psycopg2)
    - Bounded retry with exponential backoff for transient failures
    - Translation of driver errors into StoreConnectionError

    Raises:
        ConfigurationError: If the config lacks parameters the driver needs
    """

    def __init__(self, config: DatabaseConfig):
        config.check_complete()
        self.config = config
        self._driver = self._load_driver(config.driver)

    @staticmethod
    def _load_driver(driver: str) -> Any:
        if driver == "postgresql":
            import psycopg2

            return psycopg2
        return sqlite3

    @property
    def error_types(self) -> type[Exception]:
        """Base exception class of the underlying driver."""
        return self._driver.Error

    def open(self) -> Any:
        """Open a new connection, retrying transient failures.

        Returns:
            DB-API 2.0 connection; the caller must close it

        Raises:
            StoreConnectionError: If the store cannot be reached
        """
        max_attempts = self.config.connect_retries + 1
        target = self.config.describe()

        for attempt in range(max_attempts):
            try:
                connection = self._connect()
                logger.debug("connected to %s (attempt %d)", target, attempt + 1)
                return connection
            except self._driver.OperationalError as e:
                if attempt < max_attempts - 1:
                    delay = 0.1 * (2**attempt)
                    logger.warning(
                        "connection to %s failed (attempt %d/%d), retrying in %.1fs: %s",
                        target,
                        attempt + 1,
                        max_attempts,
                        delay,
                        e,
                    )
                    time.sleep(delay)
                    continue
                logger.error("cannot connect to %s: %s", target, e)
                raise StoreConnectionError(f"Cannot connect to {target}: {e}") from e
            except self._driver.Error as e:
                logger.error("cannot connect to %s: %s", target, e)
                raise StoreConnectionError(f"Cannot connect to {target}: {e}") from e

        # Should never reach here, but satisfy type checker
        raise StoreConnectionError(f"Cannot connect to {target}")

    def _connect(self) -> Any:
        config = self.config
        if config.driver == "sqlite":
            # mode=rw: a missing file is an error, not a new empty database
            uri = f"{Path(config.path).expanduser().resolve().as_uri()}?mode=rw"
            return sqlite3.connect(uri, uri=True, timeout=float(config.connect_timeout))

        params: dict[str, Any] = {"connect_timeout": config.connect_timeout}
        if config.user:
            params["user"] = config.user
        if config.password:
            params["password"] = config.password
        if config.url:
            return self._driver.connect(config.url, **params)
        return self._driver.connect(
            host=config.host,
            port=config.port,
            dbname=config.name,
            **params,
        )
