"""Task source abstraction for TaskSeed.

The generator and the SQL reader are alternative sources of task records.
Both implement this port so consumers can emit either without knowing where
the records came from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskseed.models import TaskRecord


class TaskSource(ABC):
    """Abstract base class for anything that yields a batch of task records."""

    @abstractmethod
    def fetch_all(self) -> list[TaskRecord]:
        """Return every task record this source provides.

        Returns:
            List of TaskRecord objects, complete or not at all

        Raises:
            NotImplementedError: Must be implemented by concrete source
        """
        raise NotImplementedError("TaskSource.fetch_all() must be implemented by source")
