"""
beatpaths Exception Hierarchy.

BeatPathsError (base, Exception)
├── ConfigError(BeatPathsError, ValueError)   ← malformed path section in a config file
└── PathError(BeatPathsError)                 ← path initialization failures
    ├── HomeUnresolvableError                 ← executable location could not be made absolute
    └── DataDirCreateError                    ← data directory could not be created

ConfigError multi-inherits from ValueError so callers validating input with
``except ValueError`` keep working.
"""

from __future__ import annotations


class BeatPathsError(Exception):
    """Base exception for all beatpaths errors."""


class ConfigError(BeatPathsError, ValueError):
    """Configuration file error (backward-compatible with ValueError)."""


class PathError(BeatPathsError):
    """Path initialization failed; the resolver must not be used."""


class HomeUnresolvableError(PathError):
    """The absolute location of the running executable could not be obtained."""

    def __init__(self, executable: str, cause: BaseException) -> None:
        self.executable = executable
        self.cause = cause
        super().__init__(f"The absolute path to {executable} could not be obtained: {cause}")


class DataDirCreateError(PathError):
    """
    The data directory could not be created or verified.

    Attributes:
        path: Data directory that was attempted.
        cause: Underlying filesystem error.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create data path {path}: {cause}")
