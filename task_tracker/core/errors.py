"""
Error taxonomy shared by the store, service and API layers.
"""


class TaskTrackerError(Exception):
    """Base class for all service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskTrackerError):
    """Request is missing a required field or carries an invalid value."""


class TaskNotFoundError(TaskTrackerError):
    """No task row matches the requested id."""

    def __init__(self, task_id: int, message: str = "Task not found"):
        super().__init__(message)
        self.task_id = task_id


class StoreError(TaskTrackerError):
    """The underlying database rejected a read or write."""


class SchemaError(StoreError):
    """Schema initialization failed; the service cannot start."""
