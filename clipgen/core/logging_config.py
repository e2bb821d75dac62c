"""Structured logging configuration."""

import sys
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from clipgen.core.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message} | {extra}"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure console logging and, when a path is given, a rotating log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to log file
        rotation: Log rotation size
        retention: Log retention period
    """
    logger.remove()
    level = log_level.upper()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )


def configure_logging(settings: Settings) -> None:
    """Apply the log level and log file from application settings."""
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)


def get_logger(name: str, **context: Any) -> Any:
    """
    Get a logger with the module name and any request context bound.

    Args:
        name: Logger name (typically __name__)
        **context: Additional context fields (request_id, stage, etc.)
    """
    return logger.bind(name=name, **context)


# Console-only logging until an entrypoint applies the settings
setup_logging()
