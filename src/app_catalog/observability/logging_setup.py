"""Centralized logging configuration for the app catalog service.

The log level is controlled via the LOG_LEVEL environment variable or .env file.

Usage:
    from src.app_catalog.observability.logging_setup import setup_logging

    # Call once at application startup (e.g., in main.py)
    setup_logging()

Configuration:
    LOG_LEVEL=INFO    # Default
    LOG_LEVEL=DEBUG   # Includes per-query fetch details and logger names
    LOG_LEVEL=WARNING # Only warnings and errors
"""

from __future__ import annotations

import logging
import sys

# Logger names used throughout the application
KNOWN_LOGGERS = [
    "app_catalog",                  # Observability events
    "src.app_catalog.store",        # Store adapters
    "src.app_catalog.application",  # Use cases
    "src.app_catalog.api",          # API routes
]

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level_from_settings() -> int:
    """Get the log level constant from application settings."""
    # Import here to avoid circular imports
    from ..config import settings

    return _LEVEL_MAP.get(settings.log_level.upper(), logging.INFO)


def setup_logging() -> None:
    """Configure logging for the entire application.

    Sets the root logger level and format from ``settings.log_level`` and
    quiets noisy third-party loggers. Safe to call more than once.
    """
    from ..config import settings

    log_level = get_log_level_from_settings()
    level_name = logging.getLevelName(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if log_level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for logger_name in KNOWN_LOGGERS:
        logging.getLogger(logger_name).setLevel(log_level)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    startup_logger = logging.getLogger("app_catalog.startup")
    startup_logger.info(f"Logging configured: level={level_name} (from LOG_LEVEL={settings.log_level})")
