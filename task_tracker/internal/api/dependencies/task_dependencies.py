"""
Task Dependencies.
"""

from fastapi import Request

from task_tracker.services.interfaces import ITaskService


def get_task_service(request: Request) -> ITaskService:
    """Get the Task Service built for this application in its lifespan."""
    return request.app.state.task_service
