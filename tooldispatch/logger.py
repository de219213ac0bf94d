#!/usr/bin/env python3
"""
Logging configuration module for the tool servers.

Provides structured JSON logging with rotation. Logs go to files only:
stdout is reserved for the stdio protocol stream.
"""

import datetime
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import LOGS_DIR


class JsonFormatter(logging.Formatter):
    """Custom formatter to output logs in JSON format."""
    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        # Add extra data if it exists
        if hasattr(record, 'extra_data'):
            log_record.update(record.extra_data)
        # Add exception info if it exists
        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def setup_logging(name: str, logs_dir: Path = None):
    """
    Configures the structured JSON logger for one server.

    Args:
        name: Logger name, also used as the log file prefix
        logs_dir: Directory to store log files. If None, uses LOGS_DIR

    Returns:
        Configured logger instance
    """
    if logs_dir is None:
        logs_dir = LOGS_DIR

    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Prevent logging from propagating to the root logger
    logger.propagate = False

    # If handlers are already present, do nothing
    if logger.handlers:
        return logger

    log_file = logs_dir / f"{name}-{datetime.date.today()}.log"

    # Use RotatingFileHandler to prevent log files from growing too large
    handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setFormatter(JsonFormatter())

    logger.addHandler(handler)
    return logger


def install_error_sink(logger: logging.Logger) -> None:
    """Route uncaught exceptions to the structured log before the default hook runs."""
    previous_hook = sys.excepthook

    def log_uncaught(exc_type, exc_value, exc_tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        previous_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = log_uncaught
