"""
Repository Ports.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from task_tracker.domain.entities import MutationOutcome, Task


class TaskRepositoryPort(ABC):
    """Abstract interface for Task Repository."""

    @abstractmethod
    def initialize(self) -> None:
        """Ensure the backing table exists. Raises SchemaError on failure."""
        pass

    @abstractmethod
    def list_tasks(self) -> List[Task]:
        """List all tasks, newest first."""
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Optional[Task]:
        """Get task by ID, or None when absent."""
        pass

    @abstractmethod
    def create_task(self, title: str, description: Optional[str] = None) -> int:
        """Insert a new pending task and return its id."""
        pass

    @abstractmethod
    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> MutationOutcome:
        """Coalesce-update a task; unset fields keep their stored values."""
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> MutationOutcome:
        """Delete a task."""
        pass

    @abstractmethod
    def count_tasks(self) -> int:
        """Number of stored tasks."""
        pass
