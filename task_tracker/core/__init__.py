"""
Core module containing configuration, logging, database and metrics.
"""

from .config import Settings, get_settings
from .logger import logger
from .errors import (
    TaskTrackerError,
    TaskValidationError,
    TaskNotFoundError,
    StoreError,
    SchemaError,
)
from .database import SQLiteDatabase
from .metrics import ServiceMetrics

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "TaskTrackerError",
    "TaskValidationError",
    "TaskNotFoundError",
    "StoreError",
    "SchemaError",
    "SQLiteDatabase",
    "ServiceMetrics",
]
