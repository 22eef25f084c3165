"""
Startup Orchestration.

This module provides StartupOrchestrator, the owner of the PathResolver
instance during agent startup. It runs the single initialization of the
directories, points logging at the resolved logs directory and reports the
result, after which the resolver is handed to the rest of the agent.

Example:
    >>> overrides = PathConfig(data="/var/lib/beat")
    >>> with StartupOrchestrator.from_config_file(Path("beat.yml"), overrides) as orch:
    ...     registry = orch.resolver.resolve(PathCategory.DATA, "registry")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from .config import LogLevel, PathConfig
from .logger import Logger, LogStyle
from .paths import LOGGER_NAME, PathResolver

logger = logging.getLogger(LOGGER_NAME)

T = TypeVar("T")


def _resolve(value: T | None, default_factory: Callable[[], T]) -> T:
    """
    Resolve optional dependency with lazy default instantiation.

    Args:
        value: Caller-supplied dependency, or None to use the default.
        default_factory: Zero-argument callable producing the default.

    Returns:
        The provided value or a fresh default.
    """
    return value if value is not None else default_factory()


# STARTUP ORCHESTRATOR
class StartupOrchestrator:
    """
    Initializes the agent's directories and logging once, at startup.

    Phases:

    1. Path initialization: precedence, defaults and data directory creation
    2. Logging: reconfigure with the resolved logs directory (if enabled)
    3. Reporting: log the resolved directory summary

    Dependency Injection:

    - resolver: PathResolver instance to initialize
    - log_initializer: Logging setup strategy (default: Logger.setup)

    Attributes:
        supplied (PathConfig): Base configuration
        overrides (PathConfig): Override configuration
        resolver (PathResolver): Resolver owned by this orchestrator
        run_logger (logging.Logger | None): Active logger after initialize()

    Notes:

    - Idempotent: initialize() returns the cached resolver on later calls
    - Initialization errors (PathError) propagate unchanged; the resolver is
      then unusable
    """

    def __init__(
        self,
        supplied: PathConfig,
        overrides: PathConfig | None = None,
        resolver: PathResolver | None = None,
        log_initializer: Callable | None = None,
        log_level: LogLevel = "INFO",
        log_to_file: bool = False,
    ) -> None:
        self.supplied = supplied
        self.overrides = _resolve(overrides, PathConfig)
        self.resolver = _resolve(resolver, PathResolver)
        self._log_initializer = log_initializer or Logger.setup
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.run_logger: logging.Logger | None = None

    @classmethod
    def from_config_file(
        cls, config_file: Path, overrides: PathConfig | None = None, **kwargs
    ) -> "StartupOrchestrator":
        """
        Build an orchestrator whose base configuration comes from a YAML file.

        Args:
            config_file: Beat configuration file holding the path section.
            overrides: Invocation-time values.
            **kwargs: Forwarded to the constructor.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigError: If its path section is malformed.
        """
        return cls(PathConfig.from_yaml(config_file), overrides, **kwargs)

    def __enter__(self) -> "StartupOrchestrator":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None and self.run_logger is not None:
            self.run_logger.error(f"{LogStyle.WARNING} Startup aborted: {exc_val}")
        Logger.shutdown(LOGGER_NAME)
        return False

    def initialize(self) -> PathResolver:
        """
        Run all startup phases once.

        Returns:
            The initialized PathResolver.

        Raises:
            PathError: If the directories could not be initialized.
        """
        if self.resolver.is_initialized and self.run_logger is not None:
            return self.resolver

        # Phase 1: Paths
        self.resolver.init_paths(self.supplied, self.overrides)

        # Phase 2: Logging
        log_dir = Path(self.resolver.logs) if self.log_to_file else None
        self.run_logger = self._log_initializer(
            name=LOGGER_NAME, log_dir=log_dir, level=self.log_level
        )

        # Phase 3: Reporting
        LogStyle.log_phase_header(self.run_logger, "PATH INITIALIZATION")
        self.run_logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {self.resolver.describe()}")
        if log_dir is not None:
            self.run_logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Log file: {Logger.get_log_file()}")

        return self.resolver
