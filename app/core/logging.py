"""
Centralized logging configuration for the application.

setup_logging() runs once in the FastAPI lifespan; modules only ask for a
logger.

Usage:
    from app.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Change classified as %s", category.value)
"""

import logging
import sys
from typing import Optional

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "langsmith", "multipart")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a standard format.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
    """
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)
