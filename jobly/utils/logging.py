"""Unified logging configuration for the Jobly API.

Provides consistent logging with console output and optional file output.
Log files are written under the workspace logs directory with rotation.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from jobly.settings import settings

LOG_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(filename)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "jobly"


def _ensure_app_logger_configured():
    """
    Ensure the jobly parent logger has a formatted console handler.
    Called automatically on module import.
    """
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)

    has_formatted_handler = any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, RotatingFileHandler)
        and h.formatter
        and "%(asctime)s" in (h.formatter._fmt if hasattr(h.formatter, "_fmt") else "")
        for h in app_logger.handlers
    )

    if not has_formatted_handler:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        app_logger.addHandler(console_handler)

        app_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)


def setup_logging(log_name: str = "jobly") -> logging.Logger:
    """
    Attach a rotating file handler to the jobly parent logger.

    Log file path pattern: {workspace}/logs/{log_name}.log

    Args:
        log_name: The name of the log file (without .log extension).

    Returns:
        Configured logger instance
    """
    _ensure_app_logger_configured()

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    log_dir = settings.get_logs_root()

    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        app_logger.warning(f"Log directory {log_dir} unavailable, file logging disabled: {e}")
        return app_logger

    log_file_path = os.path.join(log_dir, f"{log_name}.log")
    if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == log_file_path for h in app_logger.handlers):
        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        app_logger.addHandler(file_handler)
        app_logger.info(f"File logging enabled: {log_file_path}")

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance under the jobly namespace
    """
    _ensure_app_logger_configured()

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


_ensure_app_logger_configured()
