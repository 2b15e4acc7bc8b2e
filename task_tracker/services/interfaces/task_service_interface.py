"""
Interface for Task Service.
Defines the contract that all task services must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from task_tracker.domain.entities import Task


class ITaskService(ABC):
    """Interface for task service operations."""

    @abstractmethod
    def list_tasks(self) -> List[Task]:
        """
        List all tasks.

        Returns:
            List[Task]: Tasks ordered newest first
        """
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        """
        Get task by ID.

        Args:
            task_id: ID of the task

        Returns:
            Task: The stored task

        Raises:
            TaskNotFoundError: If no task has this id
        """
        pass

    @abstractmethod
    def create_task(self, title: Optional[str], description: Optional[str] = None) -> int:
        """
        Create a new task.

        Args:
            title: Task title, required and non-empty
            description: Optional description

        Returns:
            int: ID of the created task

        Raises:
            TaskValidationError: If title is missing or empty
        """
        pass

    @abstractmethod
    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        """
        Partially update a task.

        Args:
            task_id: ID of the task
            title: New title, unchanged when None
            description: New description, unchanged when None
            status: New status, unchanged when None

        Raises:
            TaskNotFoundError: If no task has this id
        """
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        """
        Delete a task.

        Args:
            task_id: ID of the task

        Raises:
            TaskNotFoundError: If no task has this id
        """
        pass
