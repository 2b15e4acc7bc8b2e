"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .task_repository import SQLiteTaskRepository

__all__ = [
    "SQLiteTaskRepository",
]
