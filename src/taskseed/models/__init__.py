"""TaskSeed domain models.

Pydantic models shared by the generator, the SQL reader and the CLI output.
"""

from .task import TaskRecord, TaskStatus
from .user import User

__all__ = [
    "TaskRecord",
    "TaskStatus",
    "User",
]
