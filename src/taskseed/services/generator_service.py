"""Synthetic task generation."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from datetime import date, timedelta

from taskseed.models import TaskRecord, TaskStatus, User
from taskseed.repositories import TaskSource
from taskseed.services.vocabulary import VOCABULARY

logger = logging.getLogger(__name__)

PRIORITY_LEVELS = 5

_SEED_USERS: tuple[tuple[int, str, str, str], ...] = (
    (1, "john_doe", "John Doe", "john.doe@example.com"),
    (2, "jane_smith", "Jane Smith", "jane.smith@example.com"),
    (3, "mike_johnson", "Mike Johnson", "mike.johnson@example.com"),
)


def generate_users() -> list[User]:
    """Return a fresh copy of the fixed user seed list."""
    return [
        User(id=user_id, username=username, display_name=display_name, email=email)
        for user_id, username, display_name, email in _SEED_USERS
    ]


class TaskGenerator:
    """Produces pending task records with forward-offset due dates.

    Args:
        rng: Random source for description and assignee draws. A fresh,
            unseeded ``random.Random`` is used when omitted.
        clock: Returns the date of the first generated task.
        vocabulary: Pool of descriptions to draw from.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], date] = date.today,
        vocabulary: Sequence[str] = VOCABULARY,
    ):
        if not vocabulary:
            raise ValueError("vocabulary must not be empty")
        if any(not entry or not entry.strip() for entry in vocabulary):
            raise ValueError("vocabulary entries must be non-empty strings")

        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.vocabulary = tuple(vocabulary)

    def generate(self, count: int, users: Sequence[User] | None = None) -> list[TaskRecord]:
        """Generate ``count`` task records.

        The i-th record is due ``i`` days after today and has priority
        ``i % 5``. Descriptions are drawn at random and may repeat. When
        ``users`` is given every record is assigned to one of them.

        Raises:
            ValueError: If ``count`` is negative or not an integer, or if
                ``users`` is an empty sequence.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if users is not None and len(users) == 0:
            raise ValueError("users must not be empty when assigning tasks")

        today = self.clock()
        tasks = []
        for i in range(count):
            description = self.vocabulary[self.rng.randrange(len(self.vocabulary))]
            assigned_to = self.rng.choice(users).id if users is not None else None
            tasks.append(
                TaskRecord(
                    title=f"Task {i + 1}",
                    description=description,
                    due_date=today + timedelta(days=i),
                    priority=i % PRIORITY_LEVELS,
                    status=TaskStatus.PENDING,
                    assigned_to=assigned_to,
                )
            )

        logger.debug(
            "generated %d tasks from %s (assigned=%s)",
            count,
            today.isoformat(),
            users is not None,
        )
        return tasks

    def generate_users(self) -> list[User]:
        """Return the user seed list tasks can be assigned to."""
        return generate_users()


class GeneratedTaskSource(TaskSource):
    """Task source backed by a generator instead of a store."""

    def __init__(
        self,
        generator: TaskGenerator,
        count: int,
        users: Sequence[User] | None = None,
    ):
        self.generator = generator
        self.count = count
        self.users = users

    def fetch_all(self) -> list[TaskRecord]:
        return self.generator.generate(self.count, self.users)
