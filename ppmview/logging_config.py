"""
Logging Configuration
Routes the 'ppmview' logger to stderr, so stdout stays reserved for the CLI summary.
"""
import logging
from typing import Optional

from ppmview.config import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """Replaces the package logger's handlers: stderr, plus `log_file` when given."""
    logger = logging.getLogger("ppmview")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
