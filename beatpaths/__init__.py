"""
beatpaths: canonical home, config, data and logs directories for beat-style agents.

Top-level convenience API re-exporting the most commonly used components, so
agents and the ``beatpaths`` CLI can write:

    from beatpaths import PathCategory, PathConfig, PathResolver
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("beatpaths")

from .core import (
    LogStyle,
    PathCategory,
    PathConfig,
    PathResolver,
    StartupOrchestrator,
)
from .exceptions import (
    BeatPathsError,
    ConfigError,
    DataDirCreateError,
    HomeUnresolvableError,
    PathError,
)

__all__ = [
    "__version__",
    # Core
    "LogStyle",
    "PathCategory",
    "PathConfig",
    "PathResolver",
    "StartupOrchestrator",
    # Errors
    "BeatPathsError",
    "ConfigError",
    "DataDirCreateError",
    "HomeUnresolvableError",
    "PathError",
]
