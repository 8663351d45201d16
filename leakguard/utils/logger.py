"""Logging configuration for LeakGuard."""

import logging
import sys
from typing import Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Log output goes to stderr so it never mixes with the pass banner or
    the JSON report on stdout.

    Args:
        name: Logger name (usually __name__ or the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    log_level = getattr(logging, level.upper() if level else "WARNING")

    # Only attach a handler once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
