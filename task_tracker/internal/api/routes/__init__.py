"""
API Routes.
"""

from .health_routes import PUBLIC_DIR, create_health_routes
from .task_routes import router as task_router

__all__ = [
    "PUBLIC_DIR",
    "create_health_routes",
    "task_router",
]
