"""Logging for catalog2model.

Log records go to stderr so that stdout carries only command output, such as
the CLI summary lines.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from .settings import get_settings

ROOT_LOGGER_NAME = "catalog2model"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def resolve_level(level: str) -> int:
    """
    Turn a level name into a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the catalog2model logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...); settings.log_level by default
        log_file: Extra file receiving timestamped records; settings.log_file by default
        stream: Console stream, sys.stderr by default
    """
    settings = get_settings()
    log_level = resolve_level(level or settings.log_level)
    log_file_path = log_file or settings.log_file

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    # Diagnostics are also returned to the caller; keep records out of the root logger
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under catalog2model, configuring logging on first use."""
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_logging()

    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
