"""
Centralized logging configuration for vectordash-core.

The core is embedded in a dashboard process, so setup only touches the
package logger unless the caller asks for the root logger explicitly.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

PACKAGE_LOGGER = "vectordash_core"
DEFAULT_LOG_FILE = "vectordash_core.log"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    enable_file_logging: bool = True,
    logger_name: str | None = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Set up logging with console output and an optional rotating log file.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (defaults to vectordash_core.log)
        enable_file_logging: Whether to enable file logging
        logger_name: Logger to configure; None configures the root logger

    Returns:
        The configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if enable_file_logging:
        log_path = Path(log_file or DEFAULT_LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 10MB per file, 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    if logger_name is not None:
        # Handlers live on the package logger; don't duplicate through root.
        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically ``__name__``)."""
    return logging.getLogger(name)


def configure_from_env() -> logging.Logger:
    """
    Configure logging from environment variables.

    Environment variables:
        LOG_LEVEL: Logging level (default: INFO)
        LOG_FILE: Log file path (default: vectordash_core.log)
        DISABLE_FILE_LOGGING: Set to disable file logging

    Returns:
        Configured package logger
    """
    return setup_logging(
        level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", DEFAULT_LOG_FILE),
        enable_file_logging=not os.getenv("DISABLE_FILE_LOGGING"),
    )
