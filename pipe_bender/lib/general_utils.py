"""Logging helpers shared across the package."""

from __future__ import annotations

import logging
import sys
import traceback

from .. import config

_logger = logging.getLogger(config.LOGGER_NAME)


def setup_logging(level: int | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Hosts that manage their own logging should not call this; records
    propagate to the root logger either way.

    Args:
        level: Logging level (defaults to DEBUG when config.DEBUG is set, else INFO)
        log_file: Optional path to also write log records to

    Returns:
        The configured package logger
    """
    if level is None:
        level = logging.DEBUG if config.DEBUG else logging.INFO

    _logger.setLevel(level)

    # Avoid duplicate records when setup is called more than once
    if _logger.hasHandlers():
        _logger.handlers.clear()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    _logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _logger.addHandler(file_handler)

    return _logger


def log(message: str, level: int = logging.INFO) -> None:
    """Write a message to the package logger."""
    _logger.log(level, message)


def handle_error(name: str) -> None:
    """Log the exception currently being handled, with its traceback."""
    log('===== Error =====', logging.ERROR)
    log(f'{name}\n{traceback.format_exc()}', logging.ERROR)
