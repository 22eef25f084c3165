"""
Canonical Directory Resolution.

Provides the PathResolver class, which turns two configuration records (a base
configuration, typically read from a config file, and an override record,
typically built from command-line flags) into the four canonical directories
an agent uses: home, config, data and logs.

Precedence, per field, from low to high:

1. Value from the base configuration.
2. Non-empty value from the override configuration.
3. Built-in default when still empty:
   - home: directory containing the running executable
   - config: the home path
   - data: ``<home>/data``
   - logs: ``<home>/logs``

The data directory is created (mode 0755) as part of initialization.

Lifecycle:
    A resolver is initialized once at startup, before any concurrent work,
    and then read from any number of threads. No locking is performed; a
    ``resolve()`` racing an in-flight ``init_paths()`` is a caller error.

Example:
    >>> resolver = PathResolver()
    >>> resolver.init_paths(PathConfig(home="/opt/beat"), PathConfig(data="/var/lib/beat"))
    >>> resolver.resolve(PathCategory.CONFIG, "beat.yml")
    '/opt/beat/beat.yml'
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Protocol

from ...exceptions import DataDirCreateError, HomeUnresolvableError, PathError
from .constants import DATA_DIR_MODE, DATA_DIR_NAME, LOGGER_NAME, LOGS_DIR_NAME, PathCategory

if TYPE_CHECKING:  # pragma: no cover
    from ..config.path_config import PathConfig

logger = logging.getLogger(LOGGER_NAME)

_FIELDS = ("home", "config", "data", "logs")


# PROTOCOLS
class PathSource(Protocol):
    """
    Structural contract for a path configuration record.

    Empty strings mean "not specified". Satisfied by PathConfig, but any
    object with these four attributes can be handed to ``init_paths()``.
    """

    home: str
    config: str
    data: str
    logs: str


# RESOLVER
class PathResolver:
    """
    Holds the four canonical directories and resolves paths against them.

    Two logical states exist: uninitialized (all fields empty) and initialized
    (all fields absolute, data directory present). ``init_paths()`` is the only
    transition and may be repeated; each call recomputes from its inputs only.

    Attributes:
        home: Root directory, default base for the other categories.
        config: Directory for configuration files.
        data: Directory for mutable runtime state.
        logs: Directory for log output.
    """

    def __init__(self) -> None:
        self.home = ""
        self.config = ""
        self.data = ""
        self.logs = ""
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """True once ``init_paths()`` completed without error."""
        return self._initialized

    def init_paths(self, supplied: PathSource, overrides: PathSource | None = None) -> None:
        """
        Compute all four directories and make sure the data directory exists.

        Args:
            supplied: Base configuration (e.g. the config file's path section).
            overrides: Invocation-time values (e.g. CLI flags). Non-empty
                fields replace the corresponding base values.

        Raises:
            HomeUnresolvableError: The executable's directory could not be
                made absolute.
            DataDirCreateError: The data directory could not be created.
            PathError: A supplied relative path could not be made absolute.
        """
        self._initialized = False

        home, config, data, logs = self._compute(supplied, overrides)
        self.home, self.config, self.data, self.logs = home, config, data, logs

        try:
            os.makedirs(self.data, mode=DATA_DIR_MODE, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create data path {self.data}: {e}")
            raise DataDirCreateError(self.data, e) from e

        self._initialized = True
        logger.debug(f" » Data path ready at {self.data}")

    def _compute(
        self, supplied: PathSource, overrides: PathSource | None
    ) -> tuple[str, str, str, str]:
        """Apply base values, overrides and defaults without touching any field."""
        values = {field: getattr(supplied, field) or "" for field in _FIELDS}

        # overwrite paths from the override record
        if overrides is not None:
            for field in _FIELDS:
                value = getattr(overrides, field)
                if value:
                    logger.debug(f" » {field} path overridden: {value}")
                    values[field] = value

        # home must be final before the other defaults are derived from it
        if values["home"]:
            home = _absolute(values["home"], PathCategory.HOME)
        else:
            home = _executable_dir()
            logger.debug(f" » home path defaulted to executable location: {home}")

        config = _absolute(values["config"], PathCategory.CONFIG) if values["config"] else home
        data = (
            _absolute(values["data"], PathCategory.DATA)
            if values["data"]
            else os.path.join(home, DATA_DIR_NAME)
        )
        logs = (
            _absolute(values["logs"], PathCategory.LOGS)
            if values["logs"]
            else os.path.join(home, LOGS_DIR_NAME)
        )
        return home, config, data, logs

    def resolve(self, category: PathCategory, path: str) -> str:
        """
        Resolve ``path`` to a location in one of the canonical directories.

        Absolute paths are returned unchanged and the category is ignored.

        Args:
            category: Directory role to resolve against.
            path: Relative (or absolute) file system path.

        Returns:
            ``path`` joined onto the directory for ``category``.

        Raises:
            AssertionError: ``category`` is not a PathCategory member.
        """
        # absolute paths are not changed
        if os.path.isabs(path):
            return path

        if category == PathCategory.HOME:
            base = self.home
        elif category == PathCategory.CONFIG:
            base = self.config
        elif category == PathCategory.DATA:
            base = self.data
        elif category == PathCategory.LOGS:
            base = self.logs
        else:
            raise AssertionError(f"Unknown path category: {category!r}")

        return os.path.join(base, path)

    def describe(self) -> str:
        """Single-line summary of all four paths, in Home, Config, Data, Logs order."""
        return (
            f"Home path: [{self.home}] Config path: [{self.config}] "
            f"Data path: [{self.data}] Logs path: [{self.logs}]"
        )

    def as_config(self) -> "PathConfig":
        """Snapshot the current directories as a PathConfig record."""
        from ..config.path_config import PathConfig

        return PathConfig(home=self.home, config=self.config, data=self.data, logs=self.logs)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"PathResolver(home={self.home!r}, config={self.config!r}, "
            f"data={self.data!r}, logs={self.logs!r})"
        )


# HELPERS
def _executable_dir() -> str:
    """
    Absolute directory of the running executable.

    Raises:
        HomeUnresolvableError: If the absolute path cannot be computed
            (e.g. the working directory no longer exists).
    """
    executable = sys.argv[0] if sys.argv else ""
    try:
        return os.path.abspath(os.path.dirname(executable))
    except OSError as e:
        raise HomeUnresolvableError(executable, e) from e


def _absolute(value: str, category: PathCategory) -> str:
    """Anchor a relative configured path at the working directory."""
    if os.path.isabs(value):
        return value
    try:
        return os.path.abspath(value)
    except OSError as e:
        if category == PathCategory.HOME:
            raise HomeUnresolvableError(value, e) from e
        raise PathError(f"The absolute {category} path for {value} could not be obtained: {e}") from e
