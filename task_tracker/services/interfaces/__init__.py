"""
Service Interfaces.
"""

from .task_service_interface import ITaskService

__all__ = [
    "ITaskService",
]
