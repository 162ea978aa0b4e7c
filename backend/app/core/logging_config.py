"""
Logging configuration for the application.

One stdout handler on the root logger carries both the app's ``backend.*``
loggers and uvicorn's, so server and request logs share a format.
"""
import logging
import sys

from backend.app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure application logging. Safe to call again (e.g. per lifespan); handlers are replaced."""
    level_val = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level_val,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
    logger = logging.getLogger("backend")
    logger.setLevel(level_val)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"backend.{name}")
