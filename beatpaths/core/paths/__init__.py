"""
Filesystem Authority and Path Resolution Package.

Centralizes the directory layout of a beat-style agent:

1. **Static Layer** (constants module):
   - PathCategory: Closed set of directory roles (home, config, data, logs)
   - DATA_DIR_NAME, LOGS_DIR_NAME: Default segments below the home path
   - LOGGER_NAME: Unified logging identity

2. **Dynamic Layer** (PathResolver class):
   - Precedence of override, base and default values
   - Data directory provisioning
   - Resolution of relative paths against a category

Example:
    >>> from beatpaths.core.paths import PathCategory, PathResolver
    >>> resolver = PathResolver()
    >>> resolver.init_paths(base_cfg, cli_overrides)
    >>> resolver.resolve(PathCategory.DATA, "registry")
    '/opt/beat/data/registry'
"""

from .constants import (
    DATA_DIR_MODE,
    DATA_DIR_NAME,
    LOGGER_NAME,
    LOGS_DIR_NAME,
    PathCategory,
)
from .resolver import PathResolver, PathSource

__all__ = [
    "LOGGER_NAME",
    "DATA_DIR_NAME",
    "LOGS_DIR_NAME",
    "DATA_DIR_MODE",
    "PathCategory",
    "PathResolver",
    "PathSource",
]
