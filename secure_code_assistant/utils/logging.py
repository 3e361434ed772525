"""Logging utilities."""

import logging
import os
import sys
from typing import Optional, TextIO


LOGGER_NAME = "secure_code_assistant"


def setup_logging(
    level: Optional[int] = None,
    format_str: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Setup logging for the assistant.

    Logs go to stderr so that diagnostics printed on stdout stay parseable.

    Args:
        level: Logging level (default: SCA_LOG_LEVEL env var, else WARNING)
        format_str: Custom format string
        stream: Output stream (default: stderr)

    Returns:
        Configured logger
    """
    if level is None:
        level = logging.getLevelName(os.environ.get("SCA_LOG_LEVEL", "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if format_str is None:
        format_str = "[%(asctime)s] %(levelname)s - %(message)s"

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
