"""Service layer for TaskSeed."""

from .generator_service import GeneratedTaskSource, TaskGenerator, generate_users
from .vocabulary import DEFAULT_TASK_COUNT, VOCABULARY

__all__ = [
    "DEFAULT_TASK_COUNT",
    "GeneratedTaskSource",
    "TaskGenerator",
    "VOCABULARY",
    "generate_users",
]
