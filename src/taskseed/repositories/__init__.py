"""Task source ports."""

from .repository import TaskSource

__all__ = ["TaskSource"]
