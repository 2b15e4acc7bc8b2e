"""
Task API Routes.

Handlers are plain functions (FastAPI runs them in its threadpool) because
the SQLite driver is blocking. Service errors propagate to the handlers
registered in internal.api.utils, which render them as {"error": ...}.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from task_tracker.core.logger import logger
from task_tracker.internal.api.dependencies import get_task_service
from task_tracker.internal.api.schemas import (
    ErrorResponse,
    MessageResponse,
    TaskCreateRequest,
    TaskCreatedResponse,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from task_tracker.services.interfaces import ITaskService

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Database error"}}


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List Tasks",
    description="List all tasks, newest first",
    responses={**_SERVER_ERROR},
)
def list_tasks(service: ITaskService = Depends(get_task_service)):
    tasks = service.list_tasks()
    return {"tasks": [task.to_dict() for task in tasks]}


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get Task",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def get_task(task_id: int, service: ITaskService = Depends(get_task_service)):
    task = service.get_task(task_id)
    return {"task": task.to_dict()}


@router.post(
    "",
    response_model=TaskCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a pending task. `title` is required.",
    responses={
        400: {"model": ErrorResponse, "description": "Title is required"},
        **_SERVER_ERROR,
    },
)
def create_task(
    payload: Optional[TaskCreateRequest] = None,
    service: ITaskService = Depends(get_task_service),
):
    payload = payload or TaskCreateRequest()
    task_id = service.create_task(payload.title, payload.description)
    logger.info(f"Created task via API: id={task_id}")
    return {"message": "Task created successfully", "id": task_id}


@router.put(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Update Task",
    description="Partially update a task. Omitted fields keep their stored value.",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def update_task(
    task_id: int,
    payload: Optional[TaskUpdateRequest] = None,
    service: ITaskService = Depends(get_task_service),
):
    payload = payload or TaskUpdateRequest()
    service.update_task(
        task_id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    return {"message": "Task updated successfully"}


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete Task",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def delete_task(task_id: int, service: ITaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return {"message": "Task deleted successfully"}
