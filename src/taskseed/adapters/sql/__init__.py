"""SQL adapter: reads task records from a relational store."""

from .connection import DatabaseConnection
from .task_reader import SqlTaskReader

__all__ = ["DatabaseConnection", "SqlTaskReader"]
