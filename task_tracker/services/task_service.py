"""
Task service for task management.
Validates input, delegates to the repository and records creation metrics.
"""

from typing import List, Optional

from task_tracker.core.errors import StoreError, TaskNotFoundError, TaskValidationError
from task_tracker.core.logger import format_exception_short, logger
from task_tracker.core.metrics import ServiceMetrics
from task_tracker.domain.entities import Task
from task_tracker.ports.repository import TaskRepositoryPort
from task_tracker.services.interfaces import ITaskService

TITLE_REQUIRED = "Title is required"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class TaskService(ITaskService):
    """Service for managing tasks."""

    def __init__(self, repository: TaskRepositoryPort, metrics: Optional[ServiceMetrics] = None):
        self.repository = repository
        self.metrics = metrics
        logger.debug("TaskService initialized")

    def list_tasks(self) -> List[Task]:
        try:
            return self.repository.list_tasks()
        except StoreError as e:
            logger.error(format_exception_short(e, "Failed to list tasks"))
            raise

    def get_task(self, task_id: int) -> Task:
        try:
            task = self.repository.get_task(task_id)
        except StoreError as e:
            logger.error(format_exception_short(e, f"Failed to get task {task_id}"))
            raise

        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, title: Optional[str], description: Optional[str] = None) -> int:
        if _is_blank(title):
            logger.warning("Rejected task creation without a title")
            raise TaskValidationError(TITLE_REQUIRED)

        try:
            task_id = self.repository.create_task(title, description)
        except StoreError as e:
            logger.error(format_exception_short(e, "Failed to create task"))
            raise

        # Only count inserts that actually happened.
        if self.metrics is not None:
            self.metrics.record_task_created()
        return task_id

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        if title is not None and _is_blank(title):
            raise TaskValidationError("Title must not be empty")

        try:
            outcome = self.repository.update_task(
                task_id, title=title, description=description, status=status
            )
        except StoreError as e:
            logger.error(format_exception_short(e, f"Failed to update task {task_id}"))
            raise

        if not outcome.found:
            raise TaskNotFoundError(task_id)

    def delete_task(self, task_id: int) -> None:
        try:
            outcome = self.repository.delete_task(task_id)
        except StoreError as e:
            logger.error(format_exception_short(e, f"Failed to delete task {task_id}"))
            raise

        if not outcome.found:
            raise TaskNotFoundError(task_id)
