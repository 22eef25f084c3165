"""
Logging Management Module

Handles logging configuration for the path subsystem and the agents using it.
Nothing is configured at import time: until setup() runs, records from the
``beatpaths`` logger propagate to the host application's root logger. After
setup() the logger is console-only, or console+file once the logs directory
has been resolved.

Key Features:
    - Singleton-like Behavior: Prevents duplicate handler registration
    - Dynamic Reconfiguration: Switches from console-only to file-based logging
    - Rotating File Handler: Automatic log rotation with size limits
    - Timestamp-based Files: Unique log files per agent session
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, TextIO

from ..paths import LOGGER_NAME

LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


# LOGGER CLASS
class Logger:
    """
    Manages the logging configuration of a named logger.

    Class Attributes:
        _configured_names (dict[str, bool]): Logger names already configured
        _active_log_file (Path | None): Current log file path, if any

    Attributes:
        name (str): Logger identifier (typically LOGGER_NAME)
        log_dir (Path | None): Directory for log files (None = console-only)
        log_to_file (bool): Whether a file handler is attached
        level (int): Logging level
        max_bytes (int): Log file size before rotation (default: 5MB)
        backup_count (int): Rotated files to keep (default: 5)
        stream (TextIO | None): Console stream (None = sys.stdout)

    Example:
        >>> logger = Logger().get_logger()
        >>> logger.info("Agent starting...")

        >>> logger = Logger.setup(name=LOGGER_NAME, log_dir=Path(resolver.logs))
        >>> logger.info("Logging to file now")
    """

    _configured_names: Final[dict[str, bool]] = {}
    _active_log_file: Path | None = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Path | None = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 5,
        stream: TextIO | None = None,
    ) -> None:
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file and (log_dir is not None)
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.stream = stream

        self._log = logging.getLogger(name)

        if (
            name not in Logger._configured_names
            or log_dir is not None
            or stream is not None
            or self._log.level != level
        ):
            self._setup_logger()
            Logger._configured_names[name] = True

    def _setup_logger(self) -> None:
        """
        Attach handlers: console always, rotating file only if log_dir is set.

        Existing handlers are closed and removed first so reconfiguration
        never duplicates output.
        """
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

        self._log.setLevel(self.level)
        self._log.propagate = False

        _close_handlers(self._log)

        console_h = logging.StreamHandler(self.stream or sys.stdout)
        console_h.setFormatter(formatter)
        self._log.addHandler(console_h)

        if self.log_to_file and self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            filename = self.log_dir / f"{self.name}_{timestamp}.log"

            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self._log.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """Returns the configured logging.Logger instance."""
        return self._log

    @classmethod
    def get_log_file(cls) -> Path | None:
        """Returns the active log file path, or None without file logging."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str, log_dir: Path | None = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Configure a logger from a string level.

        Args:
            name: Logger identifier (typically LOGGER_NAME)
            log_dir: Directory for log files (None = console-only mode)
            level: DEBUG, INFO, WARNING, ERROR or CRITICAL
            **kwargs (Any): Additional arguments passed to the constructor

        Returns:
            Configured logging.Logger instance

        Environment Variables:
            DEBUG: If set to "1", forces DEBUG regardless of level
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        return cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs).get_logger()

    @classmethod
    def shutdown(cls, name: str = LOGGER_NAME) -> None:
        """Detach all handlers of ``name`` and hand its records back to the root logger."""
        log = logging.getLogger(name)
        _close_handlers(log)
        log.propagate = True
        log.setLevel(logging.NOTSET)
        cls._configured_names.pop(name, None)
        cls._active_log_file = None


def _close_handlers(log: logging.Logger) -> None:
    for handler in log.handlers[:]:
        handler.close()
        log.removeHandler(handler)

