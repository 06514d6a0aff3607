"""Reads task records from the tasks table of a SQL store."""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Any

from pydantic import ValidationError

from taskseed.adapters.sql.connection import DatabaseConnection
from taskseed.adapters.sql.schema import REQUIRED_COLUMNS, SELECT_ALL_TASKS
from taskseed.adapters.sql.utils import (
    column_names,
    parse_date,
    parse_optional_int,
    row_to_dict,
)
from taskseed.config import DatabaseConfig
from taskseed.errors import MappingError, QueryError
from taskseed.models import TaskRecord, TaskStatus
from taskseed.repositories import TaskSource

logger = logging.getLogger(__name__)


class SqlTaskReader(TaskSource):
    """Materializes every row of the tasks table as a TaskRecord."""

    def __init__(self, config: DatabaseConfig):
        """Initialize the reader.

        Args:
            config: Connection parameters of the task store.

        Raises:
            ConfigurationError: If the parameters are incomplete.
        """
        self.config = config
        self.database = DatabaseConnection(config)

    def fetch_all(self) -> list[TaskRecord]:
        """Read the whole tasks table.

        Either every row is returned or an error is raised; partial results
        are never returned.

        Raises:
            StoreConnectionError: If the store cannot be reached.
            QueryError: If the query fails, e.g. the table is missing or
                a SQLite path names a file that is not a database.
            MappingError: If a row does not fit the column contract.
        """
        with closing(self.database.open()) as connection:
            try:
                with closing(connection.cursor()) as cursor:
                    cursor.execute(SELECT_ALL_TASKS)
                    rows = cursor.fetchall()
                    columns = column_names(cursor.description)
            except self.database.error_types as e:
                logger.error("query failed on %s: %s", self.config.describe(), e)
                raise QueryError(f"Query failed: {e}") from e

        self._check_columns(columns)

        tasks = []
        for index, row in enumerate(rows):
            tasks.append(self._row_to_task(index, row_to_dict(columns, row)))

        logger.info("fetched %d tasks from %s", len(tasks), self.config.describe())
        return tasks

    @staticmethod
    def _check_columns(columns: list[str]) -> None:
        missing = [col for col in REQUIRED_COLUMNS if col not in columns]
        if missing:
            logger.error("tasks table is missing columns: %s", ", ".join(missing))
            raise MappingError(
                f"tasks table is missing required columns: {', '.join(missing)}",
                column=missing[0],
            )

    @staticmethod
    def _row_to_task(index: int, row: dict[str, Any]) -> TaskRecord:
        column = "id"
        try:
            task_id = parse_optional_int(row["id"])
            if task_id is None:
                raise ValueError("id is missing")

            column = "due_date"
            due_date = parse_date(row["due_date"])

            column = "status"
            status = TaskStatus.from_db(row["status"])

            column = "priority"
            priority = parse_optional_int(row.get("priority"))

            column = "assigned_to"
            assigned_to = parse_optional_int(row.get("assigned_to"))

            column = None
            return TaskRecord(
                id=task_id,
                title=row["title"],
                description=row["description"],
                due_date=due_date,
                priority=priority,
                status=status,
                assigned_to=assigned_to,
            )
        except (ValueError, TypeError, ValidationError) as e:
            where = f"column '{column}'" if column else "row"
            logger.error("cannot map tasks row %d (%s): %s", index, where, e)
            raise MappingError(
                f"Row {index}: invalid {where}: {e}",
                row_index=index,
                column=column,
            ) from e
