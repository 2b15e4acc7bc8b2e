"""
API dependencies.
"""

from .task_dependencies import get_task_service

__all__ = [
    "get_task_service",
]
