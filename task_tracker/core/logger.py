"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

_configured = False


def _filter_reloader_logs(record) -> bool:
    """Filter out logs from __main__ and __mp_main__ (uvicorn reloader processes)."""
    return record["name"] not in ("__main__", "__mp_main__")


def setup_logger(settings=None, force: bool = False) -> None:
    """
    Configure logger handlers. Only configures once unless force=True.

    Args:
        settings: Settings instance, defaults to get_settings()
        force: Reconfigure even if handlers were already installed
    """
    global _configured

    if _configured and not force:
        return

    if settings is None:
        from .config import get_settings

        settings = get_settings()

    log_level = (settings.log_level or "").upper()
    if log_level not in _VALID_LEVELS:
        log_level = "DEBUG" if settings.debug else "INFO"

    logger.remove()

    logger.add(
        sys.stdout,
        colorize=True,
        format=_CONSOLE_FORMAT,
        level=log_level,
        filter=_filter_reloader_logs,
    )

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # File logs always DEBUG to capture everything
        logger.add(
            log_dir / "app.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=_FILE_FORMAT,
            level="DEBUG",
        )

        logger.add(
            log_dir / "error.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=_FILE_FORMAT,
            level="ERROR",
        )

    _configured = True


def format_exception_short(exc: BaseException, context: Optional[str] = None) -> str:
    """
    Render an exception as a single short line for log output.

    Args:
        exc: Exception to render
        context: Optional prefix describing what was being attempted

    Returns:
        "context: ExcType: message" (context omitted when not given)
    """
    text = f"{type(exc).__name__}: {exc}"
    return f"{context}: {text}" if context else text


# Configure logger on module import
setup_logger()

__all__ = ["logger", "setup_logger", "format_exception_short"]
