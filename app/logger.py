# app/logger.py
import sys
from typing import Optional

from loguru import logger

from .config import LOG_FILE, LOG_LEVEL

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} | {message}"


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE):
    """Replace loguru's default sink with the service's console (and optional file) sinks."""
    logger.remove()
    logger.configure(extra={"module": "app"})
    logger.add(
        sys.stderr,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]}</cyan> | <level>{message}</level>",
        level=level,
    )
    if log_file:
        logger.add(
            log_file,
            rotation="100 MB",
            retention="10 days",
            format=_FORMAT,
            level=level,
        )


def get_logger(name: Optional[str] = None):
    return logger.bind(module=name if name else "app")


configure_logging()
