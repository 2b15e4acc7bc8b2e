"""
API Schemas (Request/Response Models).
"""

from .common_schemas import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from .task_schemas import (
    TaskCreateRequest,
    TaskCreatedResponse,
    TaskDetail,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    # Common schemas
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    # Task schemas
    "TaskCreateRequest",
    "TaskCreatedResponse",
    "TaskDetail",
    "TaskListResponse",
    "TaskResponse",
    "TaskUpdateRequest",
]
