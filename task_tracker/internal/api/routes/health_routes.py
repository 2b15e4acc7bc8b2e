"""
Health, Metrics and Landing Page Routes.
"""

from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import FileResponse, Response

from task_tracker.domain.entities import utc_now_iso
from task_tracker.internal.api.schemas import HealthResponse

PUBLIC_DIR = Path(__file__).resolve().parents[3] / "public"


def create_health_routes(app: FastAPI) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        app: FastAPI application instance

    Returns:
        APIRouter: Configured router with health, metrics and landing page
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Liveness check. Does not query the database.",
        operation_id="health_check",
    )
    async def health_check():
        database = getattr(app.state, "database", None)
        connected = database is not None and database.is_connected
        return HealthResponse(
            status="healthy",
            timestamp=utc_now_iso(),
            database="connected" if connected else "disconnected",
        )

    @router.get(
        "/metrics",
        summary="Prometheus Metrics",
        response_class=Response,
        include_in_schema=False,
    )
    async def metrics():
        service_metrics = app.state.metrics
        return Response(content=service_metrics.render(), media_type=service_metrics.content_type)

    @router.get("/", summary="Landing Page", include_in_schema=False)
    async def root():
        return FileResponse(PUBLIC_DIR / "index.html")

    return router
