"""
HTTP middleware.
"""

import time

from fastapi import FastAPI, Request

from task_tracker.core.logger import logger


UNMATCHED_ROUTE = "<unmatched>"


def _route_label(request: Request) -> str:
    # Route template ("/api/tasks/{task_id}"), never the raw path.
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


def install_request_timing(app: FastAPI) -> None:
    """Record every response in the http_request_duration_seconds histogram."""

    @app.middleware("http")
    async def time_request(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start
            request.app.state.metrics.observe_request(
                request.method, _route_label(request), status_code, duration
            )
            logger.debug(
                f"{request.method} {request.url.path} -> {status_code} ({duration * 1000:.1f} ms)"
            )
