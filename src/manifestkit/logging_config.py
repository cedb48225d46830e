"""Logging configuration for manifestkit."""

import logging
import sys
from pathlib import Path

from .config import Settings, get_settings

# Log levels
LOG_LEVEL = logging.INFO

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "manifestkit"


def setup_logging(log_file: str | None = None, debug: bool = False) -> logging.Logger:
    """
    Configure logging for the manifestkit package.

    Handlers are attached to the package logger only, and replaced on each
    call so repeated setup does not duplicate output.

    Args:
        log_file: Optional path to log file. If None, logs to stdout only.
        debug: If True, enable DEBUG level logging (includes skipped YAML lines)

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if debug else LOG_LEVEL
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

        package_logger.info(f"Logging to file: {log_file}")

    package_logger.debug(f"Log Level: {logging.getLevelName(level)}")
    return package_logger


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Logger:
    """Configure logging from ``Settings`` (defaults to the environment)."""
    settings = settings or get_settings()
    return setup_logging(log_file=settings.log_file, debug=settings.debug)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)
