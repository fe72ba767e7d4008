"""
Rich-enhanced logging configuration for printflags.

Usage:
    from printflags.logging import configure_logging, get_logger

    configure_logging(level="debug", use_rich=True)

    logger = get_logger("cli")
    logger.debug("Selected printer for output %r", output)
"""

import logging
import sys
from pathlib import Path
from typing import Literal

from rich.logging import RichHandler

from .utils.ui import console as rich_console

# All package logs use this prefix
MODULE_LOGGER_NAME = "printflags"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level(level: LogLevel | str | int) -> int:
    """Convert level string to logging constant."""
    if isinstance(level, int):
        return level

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return level_map.get(level.lower(), logging.INFO)


def configure_logging(
    level: LogLevel | str | int = "warning",
    console: bool = True,
    file_path: str | Path | None = None,
    use_rich: bool = True,
    show_path: bool = False,
) -> logging.Logger:
    """
    Configure logging for the printflags package.

    Logs go to stderr so they never mix with printer output on stdout.

    Args:
        level: Log level for console and file output
        console: Whether to enable console logging
        file_path: Optional file path for file logging
        use_rich: Use Rich handler for console output
        show_path: Show file path in console logs

    Returns:
        Configured package logger
    """
    log_level = _get_log_level(level)

    logger = logging.getLogger(MODULE_LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if console:
        console_handler: logging.Handler
        if use_rich:
            console_handler = RichHandler(
                level=log_level,
                console=rich_console,
                show_time=False,
                show_path=show_path,
                markup=True,
            )
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(console_handler)

    # File handler - always plain formatting for parseable logs
    if file_path:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger under the printflags namespace.

    Args:
        name: Optional sub-logger name (e.g., "cli")
    """
    if name:
        return logging.getLogger(f"{MODULE_LOGGER_NAME}.{name}")
    return logging.getLogger(MODULE_LOGGER_NAME)


def set_level(level: LogLevel | str | int) -> None:
    """Change the log level for the package logger and its handlers."""
    log_level = _get_log_level(level)
    logger = logging.getLogger(MODULE_LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)


class LogContext:
    """
    Context manager for temporarily changing log level.

    Example:
        with LogContext("debug"):
            printer.print_obj(obj)
    """

    def __init__(self, level: LogLevel | str | int):
        self._target_level = _get_log_level(level)
        self._original_level: int | None = None

    def __enter__(self) -> "LogContext":
        logger = logging.getLogger(MODULE_LOGGER_NAME)
        self._original_level = logger.level
        logger.setLevel(self._target_level)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._original_level is not None:
            logging.getLogger(MODULE_LOGGER_NAME).setLevel(self._original_level)


__all__ = [
    "configure_logging",
    "get_logger",
    "LogContext",
    "MODULE_LOGGER_NAME",
    "set_level",
]
