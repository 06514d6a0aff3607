"""Task data models."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def from_db(cls, raw: Any) -> TaskStatus:
        """Parse a stored status value.

        Accepts the status name in any case, a boolean ``completed`` flag or
        its integer form. ``None`` means the task was never completed.

        Raises:
            ValueError: If the value is not a recognised status.
        """
        if raw is None:
            return cls.PENDING
        if isinstance(raw, bool) or raw in (0, 1):
            return cls.COMPLETED if raw else cls.PENDING
        if isinstance(raw, str):
            for status in cls:
                if status.value.lower() == raw.strip().lower():
                    return status
        raise ValueError(f"Unknown task status: {raw!r}")


class TaskRecord(BaseModel):
    """Task record, either generated in memory or read from storage.

    Equality is defined on identity fields only. A stored record (one with an
    ``id``) is identified by ``(id, title)``; a generated record by
    ``(description, completed, due_date, priority)``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    title: Optional[str] = None
    description: str = Field(min_length=1)
    due_date: date
    priority: Optional[int] = Field(default=None, ge=0, lt=5)
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: Optional[int] = None

    @property
    def completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @property
    def is_stored(self) -> bool:
        return self.id is not None

    def identity(self) -> tuple:
        if self.is_stored:
            return ("stored", self.id, self.title)
        return ("generated", self.description, self.completed, self.due_date, self.priority)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskRecord):
            return NotImplemented
        return self.identity() == other.identity()

    def __hash__(self) -> int:
        return hash(self.identity())
