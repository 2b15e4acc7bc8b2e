"""
FastAPI Service - Main entry point for the Task Tracker API.
Implements clean separation of concerns with logging and error handling:
- Routes are separated into modules
- SQLite for data persistence
- Prometheus metrics for requests and task creation
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from task_tracker.core.config import Settings, get_settings
from task_tracker.core.database import SQLiteDatabase
from task_tracker.core.errors import SchemaError
from task_tracker.core.logger import logger
from task_tracker.core.metrics import ServiceMetrics
from task_tracker.internal.api.middleware import install_request_timing
from task_tracker.internal.api.routes import PUBLIC_DIR, create_health_routes, task_router
from task_tracker.internal.api.utils import register_exception_handlers
from task_tracker.repositories import SQLiteTaskRepository
from task_tracker.services import TaskService


def _log_banner(settings: Settings) -> None:
    base_url = f"http://localhost:{settings.api_port}"
    logger.info(f"========== {settings.app_name} v{settings.app_version} ==========")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Metrics: {base_url}/metrics")
    logger.info(f"Health: {base_url}/health")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Opens the SQLite store on startup and closes it on shutdown.
    A schema failure is fatal: the app never starts serving.
    """
    settings: Settings = app.state.settings
    logger.info(f"========== Starting {settings.app_name} API service ==========")

    database = SQLiteDatabase(settings.db_path)
    repository = SQLiteTaskRepository(database)
    try:
        repository.initialize()
    except SchemaError as e:
        logger.error(f"Failed to initialize task store: {e}")
        raise

    app.state.database = database
    app.state.task_service = TaskService(repository, metrics=app.state.metrics)
    _log_banner(settings)

    try:
        yield
    finally:
        logger.info("========== Shutting down API service ==========")
        database.disconnect()
        logger.info("========== API service stopped ==========")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to get_settings()

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    logger.debug("Creating FastAPI application...")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Task tracking API backed by SQLite, instrumented with Prometheus metrics.",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Tasks", "description": "Create, read, update and delete tasks."},
            {"name": "Health", "description": "Liveness check, metrics and landing page."},
        ],
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.metrics = ServiceMetrics()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_timing(app)
    register_exception_handlers(app)

    app.include_router(task_router)
    app.include_router(create_health_routes(app))
    app.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")

    logger.debug("FastAPI application created")
    return app


def main() -> None:
    """Run the API with uvicorn. Uvicorn handles SIGTERM/SIGINT and runs the shutdown lifespan."""
    import uvicorn

    settings = get_settings()
    if settings.api_reload:
        uvicorn.run(
            "task_tracker.cmd.api.main:create_app",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level="info" if settings.debug else "warning",
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.api_host,
            port=settings.api_port,
            log_level="info" if settings.debug else "warning",
        )


# Run with: python -m task_tracker.cmd.api.main
if __name__ == "__main__":
    main()
