"""
Service layer implementing business logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .task_service import TaskService

__all__ = [
    "TaskService",
]
