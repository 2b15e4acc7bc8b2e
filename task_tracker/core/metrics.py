"""
Prometheus metrics for the API service.
"""

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)


class ServiceMetrics:
    """
    Per-application metrics registry.

    Each app instance gets its own registry so several apps (e.g. in tests)
    can live in one process without duplicate-registration errors.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            labelnames=("method", "route", "status_code"),
            registry=self.registry,
        )
        self.tasks_created = Counter(
            "tasks_total",
            "Total number of tasks created",
            registry=self.registry,
        )

    def observe_request(self, method: str, route: str, status_code: int, duration: float) -> None:
        self.http_request_duration.labels(
            method=method, route=route, status_code=str(status_code)
        ).observe(duration)

    def record_task_created(self) -> None:
        self.tasks_created.inc()

    def render(self) -> bytes:
        """Render the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry)
