"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain success message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error: str

    model_config = {
        "json_schema_extra": {"examples": [{"error": "Task not found"}]}
    }


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    timestamp: str
    database: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "timestamp": "2024-01-01T00:00:00.000000+00:00",
                    "database": "connected",
                }
            ]
        }
    }
