"""Centralized logging configuration for the rb-trees project."""

import logging
import sys
from typing import Optional

PROJECT_LOGGER = "rb_trees"


def setup_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up the project logger.

    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
        handler_type: Type of handler - "stream" or "none"

    Returns:
        Configured project logger
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger(PROJECT_LOGGER)

    # Configure only once; later calls may still adjust the level
    if logger.handlers:
        logger.setLevel(level)
        return logger

    formatter = logging.Formatter(format_string)

    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the project logger.

    Args:
        name: Module name (usually __name__ or a short component name)

    Returns:
        Logger instance
    """
    if not logging.getLogger(PROJECT_LOGGER).handlers:
        setup_logging()

    if name.startswith(PROJECT_LOGGER + ".") or name == PROJECT_LOGGER:
        return logging.getLogger(name)
    return logging.getLogger(f"{PROJECT_LOGGER}.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
