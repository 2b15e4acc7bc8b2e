"""
Pydantic schemas for Task Management API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class TaskCreateRequest(BaseModel):
    """Request model for task creation."""

    # Optional here so a missing title is reported as 400 by the service.
    title: Optional[str] = Field(default=None, description="Task title (required)")
    description: Optional[str] = Field(default=None, description="Task description")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"title": "Deploy v2", "description": "Roll out the v2 release"},
            ]
        }
    }


class TaskUpdateRequest(BaseModel):
    """Request model for partial task update. Omitted fields keep their value."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, description="Free-text status, e.g. 'done'")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "done"},
                {"title": "Deploy v2.1", "description": "Hotfix release"},
            ]
        }
    }


class TaskDetail(BaseModel):
    """Model for detailed task information."""

    id: int
    title: str
    description: Optional[str] = None
    status: str
    created_at: str
    updated_at: str


class TaskResponse(BaseModel):
    task: TaskDetail


class TaskListResponse(BaseModel):
    tasks: List[TaskDetail]


class TaskCreatedResponse(BaseModel):
    message: str
    id: int

    model_config = {
        "json_schema_extra": {
            "examples": [{"message": "Task created successfully", "id": 1}]
        }
    }
