"""
Domain layer.
"""

from .entities import DEFAULT_TASK_STATUS, MutationOutcome, Task, utc_now_iso

__all__ = [
    "DEFAULT_TASK_STATUS",
    "MutationOutcome",
    "Task",
    "utc_now_iso",
]
