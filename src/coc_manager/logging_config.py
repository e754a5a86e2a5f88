"""Logging configuration for CoC Manager.

All modules log under the "coc_manager" logger: scans and slot resolution
at DEBUG, each dispatched load/save at INFO, unreadable or damaged saves
at WARNING and failed load/save calls at ERROR. The log file lives in
%APPDATA%/CoCManager/coc_manager.log; --debug mirrors it to the console.
"""

import logging
import sys

from .config.paths import AppPaths


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Sets up logging to both file and console (if debug mode).
    Log file is stored in %APPDATA%/CoCManager/coc_manager.log

    Args:
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the application
    """
    AppPaths.ensure_config_dir()

    logger = logging.getLogger("coc_manager")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # File handler - always logs DEBUG and above
    file_handler = logging.FileHandler(AppPaths.LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        ))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'scanner', 'dispatch')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"coc_manager.{name}")
