"""Logging utilities for mira-site.

This module provides structured logging functionality with configurable
levels and output formatting for the application.
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Any

from mira_site.config import config_manager
from mira_site.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_BACKUP_COUNT,
    LOG_COLORS,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_FILE_NAME,
    LOG_MAX_FILE_SIZE_BYTES,
)
from mira_site.exceptions import ConfigurationError

# Global registry to prevent duplicate loggers across the application
_logger_instances: dict[str, "MiraSiteLogger"] = {}

# Lock for thread-safe logger operations
_logger_lock = threading.Lock()

APP_LOGGER_NAME = "mira_site"


def load_log_settings() -> tuple[str, str, Path]:
    """Load console level, file level, and file path from configuration.

    Returns:
        Tuple of (console log level name, file log level name, log file path).

    """
    default_path = config_manager.config_dir / "logs" / LOG_FILE_NAME

    try:
        global_config = config_manager.load_global_config()
    except (OSError, ConfigurationError):
        return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_path

    log_file = Path(global_config["directory"]["logs"]) / LOG_FILE_NAME
    return (
        global_config["console_log_level"],
        global_config["log_level"],
        log_file,
    )


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        Args:
            record: The log record to format

        Returns:
            Formatted log message with color codes

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]
            colored_level = f"{color}{record.levelname}{reset}"

            original_levelname = record.levelname
            record.levelname = colored_level
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class MiraSiteLogger:
    """Logger manager for mira-site."""

    def __init__(self, name: str = APP_LOGGER_NAME) -> None:
        """Initialize logger with given name.

        Only the application logger owns a console handler; module loggers
        such as ``mira_site.api.slots`` propagate to it.

        Args:
            name: Logger name

        """
        self._name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self._file_logging_setup = False
        self._console_handler: logging.StreamHandler | None = None
        self._file_handler: logging.handlers.RotatingFileHandler | None = None

        # Prevent duplicate handlers
        if "." not in name and not self.logger.handlers:
            self._setup_console_handler()

    def _setup_console_handler(self) -> None:
        """Set up console handler with colors."""
        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setFormatter(
            ColoredFormatter(LOG_CONSOLE_FORMAT, datefmt=LOG_CONSOLE_DATE_FORMAT)
        )
        self._console_handler.setLevel(logging.WARNING)
        self.logger.addHandler(self._console_handler)

    def setup_file_logging(self, log_file: Path, level: str = "DEBUG") -> None:
        """Set up file logging with rotation.

        Args:
            log_file: Path to log file
            level: Logging level for file output

        Raises:
            ConfigurationError: If file logging setup fails

        """
        with _logger_lock:
            if self._file_logging_setup and self._file_handler:
                return

            try:
                self._remove_existing_file_handlers()
                log_file.parent.mkdir(parents=True, exist_ok=True)

                self._file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=LOG_MAX_FILE_SIZE_BYTES,
                    backupCount=LOG_BACKUP_COUNT,
                    encoding="utf-8",
                )
                self._file_handler.setFormatter(
                    logging.Formatter(
                        LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT
                    )
                )
                self._file_handler.setLevel(
                    getattr(logging, level.upper(), logging.INFO)
                )

                self.logger.addHandler(self._file_handler)
                self._file_logging_setup = True
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to setup file logging: {e}"
                ) from e

    def _remove_existing_file_handlers(self) -> None:
        """Remove any existing file handlers to avoid duplicates."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                self.logger.removeHandler(handler)

    def set_console_level(self, level: str) -> None:
        """Set console logging level.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        """
        if self._console_handler:
            self._console_handler.setLevel(
                getattr(logging, level.upper(), logging.WARNING)
            )

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        if self.logger.isEnabledFor(logging.WARNING):
            self.logger.warning(message, *args, **kwargs)

    def error(
        self, message: str, *args: Any, exc_info: bool = False, **kwargs: Any
    ) -> None:
        """Log error message.

        Args:
            message: Log message
            *args: Message arguments
            exc_info: Include exception info
            **kwargs: Message keyword arguments

        """
        if self.logger.isEnabledFor(logging.ERROR):
            self.logger.error(message, *args, exc_info=exc_info, **kwargs)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes."""
    with _logger_lock:
        _logger_instances.clear()
        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith("test-") or logger_name.startswith(
                "mira_site"
            ):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    log_instance.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]


def get_logger(
    name: str = APP_LOGGER_NAME, enable_file_logging: bool = False
) -> MiraSiteLogger:
    """Get logger instance with singleton pattern.

    Args:
        name: Logger name
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    """
    if name in _logger_instances:
        return _logger_instances[name]

    logger_instance = MiraSiteLogger(name)

    console_level, file_level, log_file = load_log_settings()
    logger_instance.set_console_level(console_level)

    if enable_file_logging:
        logger_instance.setup_file_logging(log_file, file_level)

    _logger_instances[name] = logger_instance
    return logger_instance
